from reads_map.cigar import parse_cigar
from reads_map.reconstruct import AlignmentRecord

reference_seq = 'ACGTACGTACGTACGTACGT'

def make_record(name, start, raw_sequence, cigar, is_reverse=False):
    return AlignmentRecord(name=name,
                           start=start,
                           raw_sequence=raw_sequence,
                           edit_script=tuple(parse_cigar(cigar)),
                           edit_script_text=cigar,
                           is_reverse=is_reverse,
                          )
