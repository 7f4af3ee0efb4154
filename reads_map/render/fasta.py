''' Alignment-preserving FASTA: gaps are kept so every record has the
reference's length.
'''

def wrap(seq, line_width=60):
    return [seq[i:i + line_width] for i in range(0, len(seq), line_width)]

def record(header, seq, line_width=60):
    return '\n'.join([f'>{header}'] + wrap(seq, line_width))

def render_fasta(alignment_set, line_width=60):
    if line_width < 1:
        raise ValueError(f'line_width must be positive, got {line_width}')

    records = [record('Reference', alignment_set.reference, line_width)]

    for read in alignment_set.reads:
        header = f'{read.name} position={read.start} cigar={read.edit_script_text}'
        records.append(record(header, read.aligned_sequence, line_width))

    return '\n'.join(records) + '\n'
