''' Plain text table: a fixed-width label column followed by sequences. '''

import reads_map

reference_label = 'Reference:'

def label_width(alignment_set, min_label_width=20):
    widths = [len(reference_label)] + [len(read.label) for read in alignment_set.reads]
    return max(min_label_width, max(widths))

def input_files_info(alignment_fn, reference_fn):
    alignment_info = f'Input SAM/BAM: {alignment_fn if alignment_fn else "not specified"}'
    reference_info = f'Reference FASTA: {reference_fn if reference_fn else "not specified"}'
    return f'{alignment_info}\n{reference_info}'

def ruler(reference_length, width):
    ''' A '|' starts each 10-column block and the block's last column
    number is right-aligned to end under that column.
    '''
    markers = ''.join(f'|{position:>9}' for position in range(10, reference_length + 1, 10))
    return ' ' * (width + 1) + markers

def row(label, sequence, width):
    return f'{label:<{width}} {sequence}'

def render_text(alignment_set,
                alignment_fn=None,
                reference_fn=None,
                min_label_width=20,
               ):
    width = label_width(alignment_set, min_label_width)

    lines = [
        f'ReadsMap v{reads_map.__version__}',
        input_files_info(alignment_fn, reference_fn),
        '',
        ruler(alignment_set.reference_length, width),
        row(reference_label, alignment_set.reference, width),
        '',
    ]

    for read in alignment_set.reads:
        lines.append(row(read.label, read.aligned_sequence, width) + f' [CIGAR: {read.edit_script_text}]')

    return '\n'.join(lines) + '\n'
