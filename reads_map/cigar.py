''' CIGAR operations and the effect each one has when a read is laid over
reference columns.
'''

import enum
import re
from dataclasses import dataclass

import pysam

class Effect(enum.Enum):
    COPY = 'copy'
    GAP = 'gap'
    NOTHING = 'nothing'

class OperationKind(enum.Enum):
    # value: (CIGAR letter, pysam operation code, output effect, consumes read)
    Match = ('M', pysam.CMATCH, Effect.COPY, True)
    Insertion = ('I', pysam.CINS, Effect.NOTHING, True)
    Deletion = ('D', pysam.CDEL, Effect.GAP, False)
    Skip = ('N', pysam.CREF_SKIP, Effect.GAP, False)
    SoftClip = ('S', pysam.CSOFT_CLIP, Effect.NOTHING, True)
    HardClip = ('H', pysam.CHARD_CLIP, Effect.NOTHING, False)
    Padding = ('P', pysam.CPAD, Effect.GAP, False)
    SequenceMatch = ('=', pysam.CEQUAL, Effect.COPY, True)
    Mismatch = ('X', pysam.CDIFF, Effect.COPY, True)
    Other = ('?', None, Effect.NOTHING, False)

    def __init__(self, letter, code, effect, consumes_read):
        self.letter = letter
        self.code = code
        self.effect = effect
        self.consumes_read = consumes_read

    @classmethod
    def from_letter(cls, letter):
        return _letter_to_kind.get(letter, cls.Other)

    @classmethod
    def from_code(cls, code):
        return _code_to_kind.get(code, cls.Other)

_letter_to_kind = {kind.letter: kind for kind in OperationKind if kind is not OperationKind.Other}
_code_to_kind = {kind.code: kind for kind in OperationKind if kind is not OperationKind.Other}

@dataclass(frozen=True)
class CigarOp:
    length: int
    kind: OperationKind

    def __str__(self):
        return f'{self.length}{self.kind.letter}'

cigar_block_pattern = re.compile(r'(\d+)(\D)')

def parse_cigar(cigar_string):
    ''' Parses a CIGAR string like '3S10M2I5M' into a list of CigarOps.
    '*' or an empty string gives an empty list. Letters outside the SAM
    alphabet become OperationKind.Other so they can be skipped downstream.
    '''
    if cigar_string in (None, '', '*'):
        return []

    ops = []
    for length, letter in cigar_block_pattern.findall(cigar_string):
        ops.append(CigarOp(int(length), OperationKind.from_letter(letter)))

    return ops

def from_cigartuples(cigartuples):
    ''' Converts pysam's (code, length) pairs into CigarOps. '''
    if cigartuples is None:
        return []

    return [CigarOp(length, OperationKind.from_code(code)) for code, length in cigartuples]

def to_string(edit_script):
    if len(edit_script) == 0:
        return '*'
    return ''.join(str(op) for op in edit_script)
