import heapq
from collections import namedtuple
from itertools import count

from bitarray import bitarray

Leaf = namedtuple('Leaf', ('byte',))
Node = namedtuple('Node', ('left', 'right'))

# order breaks weight ties: earlier created items are merged first
WorkItem = namedtuple('WorkItem', ('weight', 'order', 'tree'))


def build_tree(items):
  if not items:
    raise ValueError('need a non empty list to build a tree')

  heap = [item._replace(order=order) for order, item in enumerate(items)]
  heapq.heapify(heap)
  orders = count(len(heap))

  while len(heap) > 1:
    first = heapq.heappop(heap)
    second = heapq.heappop(heap)

    parent = Node(left=first.tree, right=second.tree)
    heapq.heappush(heap, WorkItem(first.weight + second.weight, next(orders), parent))

  root = heap[0]
  return root.tree, root.weight


def generate_codes(tree):
  codes = {}

  def walk(node, path):
    if isinstance(node, Node):
      left = path.copy()
      left.append(0)
      walk(node.left, left)
      right = path.copy()
      right.append(1)
      walk(node.right, right)
    else:
      codes[node.byte] = path

  walk(tree, bitarray(endian='big'))
  return codes


def write_tree(bitfile, node, trace=None):
  if isinstance(node, Node):
    bitfile.write_bit(True)
    if trace is not None:
      trace.append('1')
    write_tree(bitfile, node.left, trace)
    write_tree(bitfile, node.right, trace)
  else:
    bitfile.write_bit(False)
    bitfile.write_byte(node.byte)
    if trace is not None:
      trace.append('0{}'.format(node.byte))


def read_tree(bitfile, trace=None):
  if bitfile.read_bit():
    if trace is not None:
      trace.append('1')
    left = read_tree(bitfile, trace)
    right = read_tree(bitfile, trace)
    return Node(left, right)

  byte = bitfile.read_byte()
  if trace is not None:
    trace.append('0{}'.format(byte))
  return Leaf(byte)


def leaves(tree):
  if isinstance(tree, Node):
    return leaves(tree.left) + leaves(tree.right)
  return [tree.byte]


def depth(tree):
  if isinstance(tree, Node):
    return 1 + max(depth(tree.left), depth(tree.right))
  return 0
