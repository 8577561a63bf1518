from huffzip.bitfile import BitFile
from huffzip.codec import (compress, compress_bytes, compress_file, decompress,
                           decompress_bytes, decompress_file)
from huffzip.tree import Leaf, Node, WorkItem
