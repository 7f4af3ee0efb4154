import argparse
import logging
import sys
from pathlib import Path

import tqdm
import yaml

import reads_map
import reads_map.config
import reads_map.pipeline
import reads_map.render
import reads_map.utilities
from reads_map.sources import InputError

logger = logging.getLogger(__name__)

epilog = '''\
examples:
  reads-map input/sample.bam input/reference.fasta -f html -o alignment.html
  reads-map input/sample.bam input/reference.fasta -f fasta -o aligned.fasta
'''

def build_parser():
    parser = argparse.ArgumentParser(prog='reads-map',
                                     description='Generate visualizations of reads aligned to a reference sequence',
                                     epilog=epilog,
                                     formatter_class=argparse.RawDescriptionHelpFormatter,
                                    )

    parser.add_argument('--version', action='version', version=reads_map.__version__)

    parser.add_argument('alignment_fn', type=Path, help='SAM or BAM file of reads aligned to the reference')
    parser.add_argument('reference_fn', type=Path, help='FASTA file containing the reference sequence')
    parser.add_argument('-o', '--output', type=Path, help='path to save output (default: output.txt, output.html, or output.fasta depending on format)')
    parser.add_argument('-f', '--format', help='output format: text (or txt), html, or fasta (default: text)')
    parser.add_argument('--config', type=Path, help='YAML file of rendering options')
    parser.add_argument('--progress', const=tqdm.tqdm, action='store_const', help='show progress bars')
    parser.add_argument('--max-procs', type=int, default=1, help='number of processes to use for projecting reads')
    parser.add_argument('--log-dir', type=Path, help='if specified, also write a log file into this directory')

    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    reads_map.utilities.configure_standard_logger(args.log_dir)

    try:
        config = reads_map.config.load_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f'Error: invalid configuration: {e}')
        sys.exit(1)

    format_tag = reads_map.render.normalize_format(args.format or config['format'])

    logger.info(f'Rendering {args.alignment_fn} against {args.reference_fn} as {format_tag}')

    try:
        output_fn = reads_map.pipeline.process(args.alignment_fn,
                                               args.reference_fn,
                                               output_fn=args.output,
                                               format_tag=format_tag,
                                               config=config,
                                               progress=args.progress,
                                               num_processes=args.max_procs,
                                              )
    except InputError as e:
        print(f'Error: {e}')
        sys.exit(1)

    print(f'{format_tag.upper()} visualization successfully generated at: {output_fn}')
