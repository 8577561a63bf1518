import os
from collections import Counter

from huffzip.tree import Leaf, WorkItem

# Size of the chunks read from input files
CHUNK_SIZE = 4096


def read_chunks(file, chunk_size=CHUNK_SIZE):
  while True:
    chunk = file.read(chunk_size)
    if not chunk:
      return
    yield chunk


def count_distinct(file):
  found = set()

  for chunk in read_chunks(file):
    found.update(chunk)
    if len(found) == 256:
      break

  file.seek(0)
  return len(found)


def count_bytes(file):
  counts = Counter()
  for chunk in read_chunks(file):
    counts.update(chunk)

  file.seek(0)
  return counts


def build_frequency_list(file):
  """Work list of one leaf per byte present, lightest first.

  Equal weights keep ascending byte order, and `order` records each item's
  position so the tree builder breaks later ties by creation order.
  """
  counts = count_bytes(file)
  ranked = sorted(counts.items(), key=lambda item: (item[1], item[0]))

  return [WorkItem(weight=count, order=order, tree=Leaf(byte))
          for order, (byte, count) in enumerate(ranked)]


def file_size(file):
  position = file.tell()
  size = file.seek(0, os.SEEK_END)
  file.seek(position)
  return size
