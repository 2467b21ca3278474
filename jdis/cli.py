"""Jaccard distance between the word sets of text files."""

from __future__ import annotations

import os
import sys
from typing import Iterator, TextIO

from jdis.hashtable import HashTable

WORD_LENGTH_MAX = 31
MAX_WORDS = 100000
MAX_FILES = 64

_SIZE_MASK = (1 << 64) - 1


class JdisError(Exception):
    """Raised when the distances cannot be computed."""


def str_hash(s: bytes | str) -> int:
    """Multiplicative string hash (factor 37) on 64-bit unsigned arithmetic."""
    data = s.encode("utf-8") if isinstance(s, str) else s
    h = 0
    for byte in data:
        h = (37 * h + byte) & _SIZE_MASK
    return h


def _compare_words(a: bytes, b: bytes) -> int:
    return (a > b) - (a < b)


def read_words(path: str | os.PathLike[str]) -> Iterator[bytes]:
    """Yield the whitespace-separated words of a file.

    Words longer than WORD_LENGTH_MAX bytes are split into pieces of at most
    that length.
    """
    with open(path, "rb") as f:
        data = f.read()
    for token in data.split():
        for start in range(0, len(token), WORD_LENGTH_MAX):
            yield token[start:start + WORD_LENGTH_MAX]


def jaccard_distances(
    paths: list[str],
) -> list[tuple[float, str, str]]:
    """Compute the Jaccard distance for every pair of files.

    Returns (distance, path_i, path_j) for i < j, in file order.
    Raises JdisError on too few or too many files, unreadable files or too
    many distinct words.
    """
    paths = list(paths)
    if len(paths) < 2:
        raise JdisError("Veuillez fournir au moins deux fichiers texte.")
    if len(paths) > MAX_FILES:
        raise JdisError(f"Trop de fichiers. Maximum supporté : {MAX_FILES}")

    word_to_id = HashTable(_compare_words, str_hash)
    word_count = 0
    presence: list[set[int]] = []
    for path in paths:
        ids: set[int] = set()
        try:
            for word in read_words(path):
                word_id = word_to_id.search(word)
                if word_id is None:
                    if word_count >= MAX_WORDS:
                        raise JdisError(
                            f"Fichier trop complexe (> {MAX_WORDS} mots uniques)."
                        )
                    word_id = word_count
                    word_to_id.add(word, word_id)
                    word_count += 1
                ids.add(word_id)
        except OSError as exc:
            raise JdisError(f"Erreur lors de l'ouverture de {path}") from exc
        presence.append(ids)

    results = []
    for i, first in enumerate(paths):
        for j in range(i + 1, len(paths)):
            inter = len(presence[i] & presence[j])
            union = len(presence[i] | presence[j])
            distance = 1.0 - inter / union if union else float("nan")
            results.append((distance, first, paths[j]))
    return results


def print_help(progname: str, stream: TextIO | None = None) -> None:
    """Write the usage help to stream (standard output by default)."""
    out = sys.stdout if stream is None else stream
    out.write(
        f"Utilisation: {progname} [--help|-?] fichier1.txt fichier2.txt "
        "[...fichierN.txt]\n"
        "Calculez la distance de Jaccard entre les ensembles de mots dans "
        "chaque paire de fichiers.\n"
        "Options:\n"
        "  --help, -?          affiche ce message d'aide et quitte le programme \n"
    )


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool; return the exit status."""
    progname = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "jdis"
    args = sys.argv[1:] if argv is None else list(argv)

    if not args:
        sys.stderr.write(f"Usage: {progname} <file1> <file2> ... <fileN>\n")
        return 1

    first = args[0]
    if first in ("--help", "-?"):
        print_help(progname)
        return 0
    if first.startswith("-"):
        sys.stderr.write(f"Option non supportée : {first}\n")
        return 1

    try:
        results = jaccard_distances(args)
    except JdisError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1

    for distance, path_i, path_j in results:
        sys.stdout.write(f"{distance:.4f}\t{path_i}\t{path_j}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())