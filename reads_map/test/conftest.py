import logging
import textwrap

import pytest

from reads_map.reconstruct import AlignmentSet, ReadProjection
from reads_map.test import reference_seq

sam_text = textwrap.dedent('''\
    @HD\tVN:1.6\tSO:unsorted
    @SQ\tSN:ref\tLN:20
    read1\t0\tref\t3\t60\t4M\t*\t0\t0\tACGT\t*
    read2\t16\tref\t1\t60\t4M\t*\t0\t0\tACGT\t*
    read3\t0\tref\t1\t60\t2S3M1D2M\t*\t0\t0\tNNACGTA\t*
    read4\t4\t*\t0\t0\t*\t*\t0\t0\tACGT\t*
    read5\t0\tref\t18\t60\t6M\t*\t0\t0\tTTTTTT\t*
''')

@pytest.fixture(autouse=True)
def reset_reads_map_logger():
    ''' The CLI detaches the package logger from the root logger; restore
    it so caplog keeps working in later tests.
    '''
    yield
    logger = logging.getLogger('reads_map')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)

@pytest.fixture
def reference_fn(tmp_path):
    fn = tmp_path / 'reference.fasta'
    fn.write_text(f'>ref test reference\n{reference_seq[:10].lower()}\n{reference_seq[10:]}\n')
    return fn

@pytest.fixture
def sam_fn(tmp_path):
    fn = tmp_path / 'reads.sam'
    fn.write_text(sam_text)
    return fn

@pytest.fixture
def small_set():
    reads = (
        ReadProjection('zeta', 3, '--ACGT------', '4M'),
        ReadProjection('alpha', 1, 'AC---GT-----', '2M3D2M'),
        ReadProjection('mid', 7, '------TAC?--', '2S4M'),
    )
    return AlignmentSet('ACGTACGTACGT', reads)
