"""
Digest extraction and computation.

Filenames are expected to embed a hexadecimal content digest, e.g.
``vendor-c2293867abd250a96bb64cc0c78ed603.css``. The digest algorithm is
inferred purely from the length of the hex run:

- 64 characters: SHA-256
- 40 characters: SHA-1
- 32 characters: MD5
"""

import hashlib
import os
import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from digestlint.core.errors import FileReadError

# Read size used when streaming file content through the hash functions
CHUNK_SIZE = 64 * 1024


class DigestAlgorithm(str, Enum):
    """Hash algorithms that can be named by a digest-bearing filename."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"


# Hex run length -> algorithm. Existing asset pipelines depend on this mapping.
DIGEST_LENGTHS: dict[int, DigestAlgorithm] = {
    64: DigestAlgorithm.SHA256,
    40: DigestAlgorithm.SHA1,
    32: DigestAlgorithm.MD5,
}

_HASH_FACTORIES = {
    DigestAlgorithm.MD5: hashlib.md5,
    DigestAlgorithm.SHA1: hashlib.sha1,
    DigestAlgorithm.SHA256: hashlib.sha256,
}


def _make_hex_pattern(*lengths: int) -> re.Pattern[str]:
    """
    Build the hex-run regex for the given lengths.

    Alternatives are ordered longest first so that, at the leftmost matching
    position, a 64-character run wins over its 40 and 32 character prefixes.
    Each alternative is single-case; mixed-case runs never match as a whole.
    """
    alternatives = []
    for digits in sorted(lengths, reverse=True):
        alternatives.append(f"[0-9a-f]{{{digits}}}")
        alternatives.append(f"[0-9A-F]{{{digits}}}")
    return re.compile("|".join(alternatives))


HEX_PATTERN = _make_hex_pattern(*DIGEST_LENGTHS)


@dataclass(frozen=True)
class DigestDescriptor:
    """
    A digest extracted from a filename.

    Attributes:
        digest: Lowercase hex digest found in the filename
        algorithm: Algorithm implied by the digest length
    """

    digest: str
    algorithm: DigestAlgorithm


def extract_hex_digest(name: str | Path) -> str:
    """
    Extract the first digest-length hex run from a filename.

    Only the base name is examined; directory components never participate.

    Returns:
        The lowercased hex run, or an empty string if none was found.
    """
    base_name = os.path.basename(os.fspath(name))
    match = HEX_PATTERN.search(base_name)
    if match is None:
        return ""
    return match.group(0).lower()


def describe_digest(name: str | Path) -> DigestDescriptor | None:
    """Return the digest named by a filename, or None if it names none."""
    digest = extract_hex_digest(name)
    algorithm = DIGEST_LENGTHS.get(len(digest))
    if algorithm is None:
        return None
    return DigestDescriptor(digest=digest, algorithm=algorithm)


def compute_digests(
    stream: BinaryIO,
    algorithms: Sequence[DigestAlgorithm],
    chunk_size: int = CHUNK_SIZE,
) -> list[str]:
    """
    Stream a binary file object once through each requested hash.

    Args:
        stream: Readable binary stream, consumed to EOF
        algorithms: Algorithms to compute, usually exactly one
        chunk_size: Bytes read per iteration

    Returns:
        Lowercase hex digests in the same order as ``algorithms``
    """
    hashes = [_HASH_FACTORIES[DigestAlgorithm(a)]() for a in algorithms]
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        for h in hashes:
            h.update(chunk)
    return [h.hexdigest() for h in hashes]


def hash_file(path: str | Path, algorithms: Sequence[DigestAlgorithm]) -> list[str]:
    """
    Compute the digests of a file on disk.

    Raises:
        FileReadError: If the file cannot be opened or fully read
    """
    try:
        with open(path, "rb") as f:
            return compute_digests(f, algorithms)
    except OSError as e:
        raise FileReadError(path, e) from e
