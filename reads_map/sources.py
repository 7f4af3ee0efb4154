''' Loading of the reference FASTA and of SAM/BAM alignment records. '''

import logging
from pathlib import Path

import pysam

import hits.fasta

import reads_map.cigar
from reads_map.reconstruct import AlignmentRecord

logger = logging.getLogger(__name__)

class InputError(ValueError):
    ''' An input or output file couldn't be read, parsed, or written. '''
    pass

def load_reference(fasta_fn):
    ''' Returns the upper-cased, whitespace-stripped sequence of the first
    record in fasta_fn. A file with no header line is treated as one
    unnamed record made of all of its lines.
    '''
    fasta_fn = Path(fasta_fn)

    if not fasta_fn.exists():
        raise InputError(f'Failed to read file: {fasta_fn} does not exist')

    try:
        lines = fasta_fn.read_text().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f'Failed to read file: {e}') from e

    if not any(line.startswith('>') for line in lines):
        records = {'Unknown': ''.join(lines).upper()}
    else:
        try:
            records = hits.fasta.to_dict(fasta_fn, upper_case=True)
        except Exception as e:
            raise InputError(f'Error parsing FASTA file {fasta_fn}: {e}') from e

    if len(records) == 0:
        raise InputError('Invalid FASTA format or empty sequence')

    name, seq = next(iter(records.items()))
    seq = ''.join(str(seq).split())

    if seq == '':
        raise InputError('Invalid FASTA format or empty sequence')

    logger.info(f'Loaded reference {name} ({len(seq):,} nts) from {fasta_fn}')

    return seq

def alignment_to_record(al):
    if al.is_unmapped:
        start = 0
    else:
        start = al.reference_start + 1

    return AlignmentRecord(name=al.query_name,
                           start=start,
                           raw_sequence=al.query_sequence or '',
                           edit_script=tuple(reads_map.cigar.from_cigartuples(al.cigartuples)),
                           edit_script_text=al.cigarstring or '*',
                           is_reverse=al.is_reverse,
                          )

def load_alignments(alignment_fn):
    ''' Returns an AlignmentRecord for every record in a SAM or BAM file, in
    file order.
    '''
    alignment_fn = Path(alignment_fn)

    if not alignment_fn.exists():
        raise InputError(f'Failed to parse SAM/BAM file: {alignment_fn} does not exist')

    saved_verbosity = pysam.set_verbosity(0)

    try:
        with pysam.AlignmentFile(str(alignment_fn), check_sq=False) as fh:
            records = [alignment_to_record(al) for al in fh]
    except Exception as e:
        raise InputError(f'Failed to parse SAM/BAM file: {e}') from e
    finally:
        pysam.set_verbosity(saved_verbosity)

    logger.info(f'Loaded {len(records):,} alignment records from {alignment_fn}')

    return records

def forward_records(records):
    ''' Drops reverse-strand records and unmapped records, which have no
    start column.
    '''
    kept = []
    num_reverse = 0
    num_unmapped = 0

    for record in records:
        if record.start < 1:
            num_unmapped += 1
        elif record.is_reverse:
            num_reverse += 1
        else:
            kept.append(record)

    if num_reverse > 0 or num_unmapped > 0:
        logger.info(f'Excluded {num_reverse:,} reverse-strand and {num_unmapped:,} unmapped records')

    return kept
