import struct

from bitarray import bitarray
from bitarray.util import ba2int, int2ba

# Uncompressed size header: u64, little endian
SIZE_FORMAT = '<Q'
SIZE_LENGTH = struct.calcsize(SIZE_FORMAT)


class BitFile:
  """Bit level reads and writes over a byte oriented file handle.

  Bits are packed MSB first. A handle is used either for reading or for
  writing, never both. When writing, `flush` must be called once at the
  end or the pending bits of the last byte are lost.
  """

  def __init__(self, file, path=None):
    self.file = file
    self.path = path or getattr(file, 'name', '<stream>')
    self.buffer = bitarray(endian='big')
    self.offset = 0
    self.size = None

  @classmethod
  def open(cls, path):
    return cls(open(path, 'rb'), path)

  @classmethod
  def create(cls, path):
    return cls(open(path, 'wb'), path)

  def __enter__(self):
    return self

  def __exit__(self, *exc_info):
    self.close()

  def close(self):
    self.file.close()

  def tell(self):
    return self.file.tell()

  def read_bit(self):
    if self.offset == 0:
      byte = self.file.read(1)
      if not byte:
        raise EOFError('unexpected end of file in {}'.format(self.path))
      self.buffer = bitarray(endian='big')
      self.buffer.frombytes(byte)

    bit = self.buffer[self.offset]
    self.offset = (self.offset + 1) % 8
    return bool(bit)

  def read_byte(self):
    bits = bitarray(endian='big')
    for _ in range(8):
      bits.append(self.read_bit())
    return ba2int(bits)

  def read_bytes(self, length):
    return bytes(self.read_byte() for _ in range(length))

  def write_bit(self, bit):
    self.buffer.append(bool(bit))
    self.offset += 1

    if self.offset == 8:
      self.file.write(self.buffer.tobytes())
      self.buffer = bitarray(endian='big')
      self.offset = 0
      return True

    return False

  def write_bits(self, bits):
    written = 0
    for bit in bits:
      if self.write_bit(bit):
        written += 1
    return written

  def write_byte(self, byte):
    self.write_bits(int2ba(byte, length=8, endian='big'))

  def write_bytes(self, data):
    for byte in data:
      self.write_byte(byte)

  def write_size(self, size):
    self.write_bytes(struct.pack(SIZE_FORMAT, size))

  def flush(self):
    # zero padding up to the next byte boundary
    while self.offset != 0:
      self.write_bit(False)

  def read_size(self):
    raw = self.file.read(SIZE_LENGTH)
    if len(raw) != SIZE_LENGTH:
      raise ValueError('wrong file format: {} has a {} byte header, expected {}'.format(
        self.path, len(raw), SIZE_LENGTH))

    self.size = struct.unpack(SIZE_FORMAT, raw)[0]
    return self.size
