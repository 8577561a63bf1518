#!/usr/bin/env python3
import argparse
import sys
from pathlib import Path

from huffzip.codec import compress, decompress

MODES = {
  'c': 'compress',
  'compress': 'compress',
  'd': 'decompress',
  'decompress': 'decompress',
}

SUFFIXES = {
  'compress': '.huff',
  'decompress': '.dhuff',
}


class Reporter:
  def __init__(self, path, verbose=False, stream=None):
    self.path = path
    self.verbose = verbose
    self.stream = stream or sys.stderr

  def __call__(self, stage, value):
    if not self.verbose:
      return

    if stage == 'bytes':
      print('\r[=] [{}] [BYTES]> {}'.format(self.path, value), end='', file=self.stream)
    elif stage == 'done':
      print(file=self.stream)
    else:
      print(self.message(stage, value), file=self.stream)

  def message(self, stage, value):
    if stage == 'distinct':
      return '[+] Number of different bytes: {}'.format(value)
    if stage == 'list':
      return '[+] Successfully built Huffman list for [{}] different bytes.'.format(value)
    if stage == 'tree':
      return '[+] Successfully built tree for [{}] bytes'.format(value)
    if stage == 'header':
      return '[=] [{}] [SIZE]> {} bytes'.format(self.path, value)
    if stage == 'size':
      return '[=] [{}] [DEC]> {} bytes'.format(self.path, value)
    if stage == 'tree_bits':
      return '[=] [{}] [TREE]> {}'.format(self.path, value)
    return '[=] {}: {}'.format(stage, value)


def output_path(in_path, out_path, mode, iteration):
  if out_path is None:
    path = Path(in_path)
    out_path = str(path.parent / path.stem)

  return '{}{}{}'.format(out_path, SUFFIXES[mode], iteration)


def build_parser():
  parser = argparse.ArgumentParser(prog='huffzip', description='Huffman coding file compressor')
  parser.add_argument('-m', '--mode', required=True, choices=sorted(MODES), help='action to perform')
  parser.add_argument('-i', '--inpath', required=True, metavar='FILE', help='the path of the input file to process')
  parser.add_argument('-v', '--verbose', action='store_true', help='print progress while working')
  parser.add_argument('out_path', nargs='?', help='the path of the output')
  parser.add_argument('N', nargs='?', type=int, default=1, help='number of iterations')
  return parser


def main(argv=None):
  parser = build_parser()
  args = parser.parse_args(argv)
  if args.N < 1:
    parser.error('N must be at least 1')

  mode = MODES[args.mode]
  action = compress if mode == 'compress' else decompress

  for iteration in range(args.N):
    path_out = output_path(args.inpath, args.out_path, mode, iteration)
    if args.verbose:
      print('[+] HUFFMAN {}'.format(mode.upper()), file=sys.stderr)
      print('[+] In file: [{}]'.format(args.inpath), file=sys.stderr)
      print('[+] Out file: [{}]'.format(path_out), file=sys.stderr)

    try:
      count = action(args.inpath, path_out, Reporter(path_out, args.verbose))
    except (OSError, EOFError, ValueError) as e:
      print('[-] {}'.format(e), file=sys.stderr)
      return 1

    if mode == 'compress':
      print('[+] Finished writing compressed file [{}] ({} bytes).'.format(path_out, count))
    else:
      print('[+] Decompressed [{}] bytes into [{}].'.format(count, path_out))

  return 0


if __name__ == '__main__':
  sys.exit(main())
