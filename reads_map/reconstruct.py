import functools
import logging
import multiprocessing
from dataclasses import dataclass

from reads_map.cigar import Effect

logger = logging.getLogger(__name__)

GAP = '-'

def reconstruct(raw_sequence, edit_script, start, reference_length):
    ''' Lays raw_sequence over reference columns according to edit_script.

    start is the 1-based reference column of the first aligned base. The
    returned string always has length reference_length: the reconstructed
    segment is truncated from the right or padded with GAP on the right.
    Operations that would copy past the end of raw_sequence copy whatever
    is left.
    '''
    if start < 1:
        raise ValueError(f'start must be >= 1, got {start}')

    pieces = [GAP * (start - 1)]
    read_cursor = 0

    for op in edit_script:
        effect = op.kind.effect

        if effect is Effect.COPY:
            pieces.append(raw_sequence[read_cursor:read_cursor + op.length])
        elif effect is Effect.GAP:
            pieces.append(GAP * op.length)

        if op.kind.consumes_read:
            read_cursor += op.length

    aligned = ''.join(pieces)

    return aligned[:reference_length].ljust(reference_length, GAP)

@dataclass(frozen=True)
class AlignmentRecord:
    name: str
    start: int
    raw_sequence: str
    edit_script: tuple
    edit_script_text: str = '*'
    is_reverse: bool = False

@dataclass(frozen=True)
class ReadProjection:
    name: str
    start: int
    aligned_sequence: str
    edit_script_text: str

    @property
    def label(self):
        return f'{self.name} ({self.start}):'

@dataclass(frozen=True)
class AlignmentSet:
    reference: str
    reads: tuple = ()

    @property
    def reference_length(self):
        return len(self.reference)

def project_record(record, reference_length):
    aligned_sequence = reconstruct(record.raw_sequence,
                                   record.edit_script,
                                   record.start,
                                   reference_length,
                                  )

    return ReadProjection(record.name,
                          record.start,
                          aligned_sequence,
                          record.edit_script_text,
                         )

def build_alignment_set(reference, records, progress=None, num_processes=1):
    ''' Projects every record onto reference and collects the results, in
    the order records were given, into an AlignmentSet.

    If num_processes > 1, records are projected in a multiprocessing.Pool.
    progress, if given, is a tqdm-like callable wrapped around the records.
    '''
    if progress is None:
        def ignore_kwargs(x, **kwargs):
            return x
        progress = ignore_kwargs

    records = list(records)
    reference_length = len(reference)

    logger.info(f'Projecting {len(records):,} reads onto {reference_length:,} reference columns')

    if num_processes > 1 and len(records) > 1:
        project = functools.partial(project_record, reference_length=reference_length)
        with multiprocessing.Pool(processes=num_processes) as pool:
            # imap yields results in input order regardless of completion order.
            results = pool.imap(project, records, chunksize=max(1, len(records) // (4 * num_processes)))
            projections = list(progress(results, total=len(records)))
    else:
        projections = [project_record(record, reference_length) for record in progress(records, total=len(records))]

    return AlignmentSet(reference, tuple(projections))
