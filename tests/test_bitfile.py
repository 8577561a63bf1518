import io
import struct

import pytest
from bitarray import bitarray

from huffzip.bitfile import BitFile


def writer():
  return BitFile(io.BytesIO())


def reader(data):
  return BitFile(io.BytesIO(data))


def test_bits_are_packed_msb_first():
  bitfile = writer()
  for bit in (1, 0, 1):
    bitfile.write_bit(bit)
  bitfile.flush()

  assert bitfile.file.getvalue() == b'\xa0'


def test_write_bit_reports_flushed_byte():
  bitfile = writer()
  flushed = [bitfile.write_bit(True) for _ in range(8)]

  assert flushed == [False] * 7 + [True]
  assert bitfile.file.getvalue() == b'\xff'
  assert bitfile.offset == 0


def test_write_bits_counts_emitted_bytes():
  bitfile = writer()
  bitfile.write_bit(True)

  assert bitfile.write_bits(bitarray('0' * 7 + '1' * 9)) == 2
  assert bitfile.file.getvalue() == b'\x80\xff'
  assert bitfile.offset == 1


def test_flush_without_pending_bits_writes_nothing():
  bitfile = writer()
  bitfile.write_byte(0x42)
  bitfile.flush()

  assert bitfile.file.getvalue() == b'\x42'


def test_unaligned_bytes_span_two_bytes():
  bitfile = writer()
  bitfile.write_bit(True)
  bitfile.write_byte(0x61)
  bitfile.flush()

  assert bitfile.file.getvalue() == b'\xb0\x80'

  bitfile = reader(b'\xb0\x80')
  assert bitfile.read_bit() is True
  assert bitfile.read_byte() == 0x61


def test_read_bytes():
  bitfile = reader(b'huff')
  assert bitfile.read_bytes(4) == b'huff'


def test_read_past_end_raises_eof():
  bitfile = reader(b'\x01')
  bitfile.read_byte()

  with pytest.raises(EOFError):
    bitfile.read_bit()


def test_size_header_is_little_endian():
  bitfile = writer()
  bitfile.write_size(0x0102)

  assert bitfile.file.getvalue() == b'\x02\x01' + b'\x00' * 6
  assert reader(bitfile.file.getvalue()).read_size() == 0x0102


def test_read_size_stores_size():
  bitfile = reader(struct.pack('<Q', 12345) + b'\x00')

  assert bitfile.size is None
  bitfile.read_size()
  assert bitfile.size == 12345


def test_short_header_is_wrong_format():
  with pytest.raises(ValueError):
    reader(b'\x01\x02\x03').read_size()


def test_open_and_create(tmp_path):
  path = str(tmp_path / 'bits')
  with BitFile.create(path) as bitfile:
    bitfile.write_bytes(b'ok')
    bitfile.write_bit(True)
    bitfile.flush()
    assert bitfile.tell() == 3

  with BitFile.open(path) as bitfile:
    assert bitfile.path == path
    assert bitfile.read_bytes(2) == b'ok'
    assert bitfile.read_bit() is True
    assert bitfile.read_bit() is False
