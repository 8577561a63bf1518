import io

from huffzip.bitfile import BitFile
from huffzip.frequency import (CHUNK_SIZE, build_frequency_list, count_distinct,
                               file_size, read_chunks)
from huffzip.tree import (Node, build_tree, generate_codes, read_tree,
                          write_tree)


def quiet(stage, value):
  pass


def analyse(file_in, report=quiet):
  """Build the Huffman tree and codes for an input file.

  Returns `(tree, codes, size)`. The file is left rewound to its start.
  Raises ValueError for an empty file or when the tree does not account
  for every byte of the file.
  """
  distinct = count_distinct(file_in)
  report('distinct', distinct)

  items = build_frequency_list(file_in)
  if not items:
    raise ValueError('cannot compress an empty file')
  if len(items) != distinct:
    raise ValueError('error while building the frequency list: {} entries for {} different bytes'.format(
      len(items), distinct))
  report('list', len(items))

  tree, weight = build_tree(items)
  size = file_size(file_in)
  if weight != size:
    raise ValueError('error while building the tree: weight {} for a {} byte file'.format(weight, size))
  report('tree', weight)

  return tree, generate_codes(tree), size


def compress_stream(file_in, bitfile, codes, report=quiet):
  total = 0

  for chunk in read_chunks(file_in):
    for byte in chunk:
      code = codes.get(byte)
      if code is None:
        raise ValueError('byte ({}) not found in codes'.format(byte))
      total += bitfile.write_bits(code)
    report('bytes', total)

  return total


def write_compressed(file_in, file_out, tree, codes, size, report=quiet):
  bitfile = BitFile(file_out)

  bitfile.write_size(size)
  report('header', size)

  trace = []
  write_tree(bitfile, tree, trace)
  report('tree_bits', ''.join(trace))

  compress_stream(file_in, bitfile, codes, report)
  bitfile.flush()

  written = bitfile.tell()
  report('done', written)
  return written


def compress_file(file_in, file_out, report=quiet):
  tree, codes, size = analyse(file_in, report)
  return write_compressed(file_in, file_out, tree, codes, size, report)


def decode_byte(bitfile, tree):
  # a lone leaf decodes without consuming any bits
  node = tree
  while isinstance(node, Node):
    node = node.right if bitfile.read_bit() else node.left
  return node.byte


def decompress_stream(bitfile, tree, file_out, size=None, report=quiet):
  if size is None:
    size = bitfile.size
  if size is None:
    raise ValueError('size must be read before decompressing')

  decoded = 0
  while decoded != size:
    file_out.write(bytes((decode_byte(bitfile, tree),)))
    decoded += 1
    if decoded % CHUNK_SIZE == 0:
      report('bytes', decoded)

  return decoded


def read_header(bitfile, report=quiet):
  size = bitfile.read_size()
  report('size', size)

  trace = []
  tree = read_tree(bitfile, trace)
  report('tree_bits', ''.join(trace))
  return tree


def decompress_file(file_in, file_out, report=quiet):
  bitfile = BitFile(file_in)
  tree = read_header(bitfile, report)

  decoded = decompress_stream(bitfile, tree, file_out, report=report)
  report('done', decoded)
  return decoded


def compress(path_in, path_out, report=quiet):
  with open(path_in, 'rb') as file_in:
    tree, codes, size = analyse(file_in, report)
    with open(path_out, 'wb') as file_out:
      return write_compressed(file_in, file_out, tree, codes, size, report)


def decompress(path_in, path_out, report=quiet):
  with open(path_in, 'rb') as file_in:
    bitfile = BitFile(file_in, path_in)
    tree = read_header(bitfile, report)

    with open(path_out, 'wb') as file_out:
      decoded = decompress_stream(bitfile, tree, file_out, report=report)

  report('done', decoded)
  return decoded


def compress_bytes(original):
  file_out = io.BytesIO()
  compress_file(io.BytesIO(original), file_out)
  return file_out.getvalue()


def decompress_bytes(compressed):
  file_out = io.BytesIO()
  decompress_file(io.BytesIO(compressed), file_out)
  return file_out.getvalue()
