from abc import ABC, abstractmethod
from typing import Optional, TypeVar, Union


Bytes = Union[bytes, bytearray, memoryview]

C = TypeVar('C', bound='CRC')


# -----------------------------------------------------------------------------

def mask(n: int) -> int:
    """
    >>> hex(mask(8))
    '0xff'
    >>> hex(mask(16))
    '0xffff'
    """
    return (1 << n) - 1


def msb(n: int) -> int:
    """
    >>> hex(msb(8))
    '0x80'
    >>> hex(msb(32))
    '0x80000000'
    """
    return 1 << (n - 1)


# -----------------------------------------------------------------------------

class CRC(ABC):
    """
    Non-reflected, MSB-first CRC computed bit by bit.

    The register starts at all-ones and the reported value is the register
    complemented. Subclasses only bind WIDTH and DEFAULT_POLYNOMIAL.

    >>> crc = CRC8()
    >>> crc.update(b'hello world')
    >>> hex(crc.finalize())
    '0x94'
    """

    @property
    @abstractmethod
    def WIDTH(self) -> int:
        raise NotImplementedError

    @property
    @abstractmethod
    def DEFAULT_POLYNOMIAL(self) -> int:
        raise NotImplementedError

    def __init__(self, polynomial: Optional[int] = None):
        if polynomial is None:
            polynomial = self.DEFAULT_POLYNOMIAL

        # Only the low WIDTH bits of the generator take part in the division.
        self._polynomial = polynomial & mask(self.WIDTH)
        self._register = mask(self.WIDTH)

    def __repr__(self) -> str:
        digits = self.WIDTH // 4
        return (f"{type(self).__name__}("
                f"polynomial=0x{self._polynomial:0{digits}X}, "
                f"register=0x{self._register:0{digits}X})")

    @classmethod
    def create(cls: type[C], polynomial: int) -> C:
        return cls(polynomial)

    @classmethod
    def new(cls: type[C], *fragments: Bytes) -> C:
        "Default engine updated with each of the fragments in order."
        crc = cls()
        for fragment in fragments:
            crc.update(fragment)
        return crc

    @property
    def width(self) -> int:
        return self.WIDTH

    @property
    def polynomial(self) -> int:
        return self._polynomial

    @property
    def register(self) -> int:
        return self._register

    def update(self, data: Bytes):
        # Constants are bound to locals, the inner loop runs 8 times per byte.
        width_mask = mask(self.WIDTH)
        top = msb(self.WIDTH)
        align = self.WIDTH - 8
        polynomial = self._polynomial
        crc = self._register

        for b in memoryview(data).cast('B'):
            crc ^= b << align
            for _ in range(8):
                if crc & top:
                    # Shifting out a set bit divides by the generator.
                    crc = ((crc << 1) & width_mask) ^ polynomial
                else:
                    crc = (crc << 1) & width_mask

        self._register = crc

    def finalize(self) -> int:
        return self._register ^ mask(self.WIDTH)

    def digest(self) -> bytes:
        "Return the finalized value as big-endian bytes."
        return self.finalize().to_bytes(self.WIDTH // 8, byteorder='big')

    def copy(self: C) -> C:
        other = type(self)(self._polynomial)
        other._register = self._register
        return other


# -----------------------------------------------------------------------------

class CRC8(CRC):
    WIDTH = 8
    DEFAULT_POLYNOMIAL = 0b0000_0111


class CRC16(CRC):
    WIDTH = 16
    DEFAULT_POLYNOMIAL = 0b1000_0000_0000_0101


class CRC32(CRC):
    WIDTH = 32
    DEFAULT_POLYNOMIAL = 0b0000_0100_1100_0001_0001_1101_1011_0111


class CRC64(CRC):
    WIDTH = 64
    DEFAULT_POLYNOMIAL = int(
        '0100_0010_1111_0000_1110_0001_1110_1011'
        '_1010_1001_1110_1010_0011_0110_1001_0011',
        2
    )


class CRC128(CRC):
    WIDTH = 128
    # 124 significant bits, the top of the register is zero-filled.
    DEFAULT_POLYNOMIAL = int(
        '1110_0011_1100_0011_1101_0101_1010_0111_1110_1001_1111_0111'
        '_1101_0100_1110_0001_1111_0011_1111_0000_1111_1011_1010_1011'
        '_0110_0101_1100_0111_1000_1001_0001',
        2
    )


ENGINES: dict[int, type[CRC]] = {
    e.WIDTH: e for e in (CRC8, CRC16, CRC32, CRC64, CRC128)
}


def engine(width: int) -> type[CRC]:
    """
    >>> engine(32).__name__
    'CRC32'
    """
    try:
        return ENGINES[width]
    except KeyError:
        raise ValueError(f"No CRC engine of width: {width}") from None


# -----------------------------------------------------------------------------

def checksum(width: int, bs: Bytes, polynomial: Optional[int] = None) -> int:
    crc = engine(width)(polynomial)
    crc.update(bs)
    return crc.finalize()


def crc8(bs: Bytes, polynomial: Optional[int] = None) -> int:
    return checksum(8, bs, polynomial)


def crc16(bs: Bytes, polynomial: Optional[int] = None) -> int:
    return checksum(16, bs, polynomial)


def crc32(bs: Bytes, polynomial: Optional[int] = None) -> int:
    return checksum(32, bs, polynomial)


def crc64(bs: Bytes, polynomial: Optional[int] = None) -> int:
    return checksum(64, bs, polynomial)


def crc128(bs: Bytes, polynomial: Optional[int] = None) -> int:
    return checksum(128, bs, polynomial)
