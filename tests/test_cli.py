import pytest

from jdis.cli import (
    MAX_FILES,
    MAX_WORDS,
    WORD_LENGTH_MAX,
    JdisError,
    jaccard_distances,
    main,
    print_help,
    read_words,
    str_hash,
)


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_str_hash_empty_is_zero():
    assert str_hash(b"") == 0


def test_str_hash_single_byte_is_its_value():
    assert str_hash(b"a") == ord("a")


def test_str_hash_str_and_bytes_agree():
    assert str_hash("hello") == str_hash(b"hello")


def test_str_hash_stays_within_64_bits():
    assert 0 <= str_hash(b"z" * 200) < 2**64


def test_read_words_splits_on_whitespace(tmp_path):
    path = _write(tmp_path, "a.txt", "one  two\tthree\nfour\r\n")
    assert list(read_words(path)) == [b"one", b"two", b"three", b"four"]


def test_read_words_splits_long_tokens(tmp_path):
    token = "x" * (WORD_LENGTH_MAX + 9)
    path = _write(tmp_path, "a.txt", token)
    pieces = list(read_words(path))
    assert [len(p) for p in pieces] == [WORD_LENGTH_MAX, 9]
    assert b"".join(pieces) == token.encode()


def test_identical_files_have_zero_distance(tmp_path):
    a = _write(tmp_path, "a.txt", "the cat sat")
    b = _write(tmp_path, "b.txt", "sat the cat cat")
    assert jaccard_distances([a, b]) == [(0.0, a, b)]


def test_disjoint_files_have_distance_one(tmp_path):
    a = _write(tmp_path, "a.txt", "alpha beta")
    b = _write(tmp_path, "b.txt", "gamma delta")
    assert jaccard_distances([a, b]) == [(1.0, a, b)]


def test_partial_overlap(tmp_path):
    a = _write(tmp_path, "a.txt", "a b")
    b = _write(tmp_path, "b.txt", "b c")
    [(distance, _, _)] = jaccard_distances([a, b])
    assert distance == pytest.approx(2 / 3)


def test_all_pairs_in_order(tmp_path):
    paths = [_write(tmp_path, f"{n}.txt", "w") for n in "abc"]
    pairs = [(p, q) for _, p, q in jaccard_distances(paths)]
    assert pairs == [
        (paths[0], paths[1]),
        (paths[0], paths[2]),
        (paths[1], paths[2]),
    ]


def test_distance_is_symmetric(tmp_path):
    a = _write(tmp_path, "a.txt", "x y z")
    b = _write(tmp_path, "b.txt", "y z w v")
    assert jaccard_distances([a, b])[0][0] == jaccard_distances([b, a])[0][0]


def test_too_few_files_raises(tmp_path):
    a = _write(tmp_path, "a.txt", "x")
    with pytest.raises(JdisError):
        jaccard_distances([a])


def test_too_many_files_raises(tmp_path):
    a = _write(tmp_path, "a.txt", "x")
    with pytest.raises(JdisError, match="Trop de fichiers"):
        jaccard_distances([a] * (MAX_FILES + 1))


def test_missing_file_raises(tmp_path):
    a = _write(tmp_path, "a.txt", "x")
    missing = str(tmp_path / "missing.txt")
    with pytest.raises(JdisError, match="ouverture"):
        jaccard_distances([a, missing])


def test_too_many_unique_words_raises(tmp_path):
    a = _write(tmp_path, "a.txt", " ".join(f"w{i}" for i in range(MAX_WORDS + 1)))
    b = _write(tmp_path, "b.txt", "x")
    with pytest.raises(JdisError, match="trop complexe"):
        jaccard_distances([a, b])


def test_print_help_mentions_options(capsys):
    print_help("prog")
    out = capsys.readouterr().out
    assert out.startswith("Utilisation: prog ")
    assert "--help, -?" in out


def test_main_without_arguments_fails(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().err


@pytest.mark.parametrize("option", ["--help", "-?"])
def test_main_help(option, capsys):
    assert main([option]) == 0
    assert "Options:" in capsys.readouterr().out


def test_main_unsupported_option(capsys):
    assert main(["-x"]) == 1
    assert "Option non supportée : -x" in capsys.readouterr().err


def test_main_single_file_fails(tmp_path, capsys):
    a = _write(tmp_path, "a.txt", "x")
    assert main([a]) == 1
    assert "au moins deux fichiers" in capsys.readouterr().err


def test_main_prints_distances(tmp_path, capsys):
    a = _write(tmp_path, "a.txt", "same words")
    b = _write(tmp_path, "b.txt", "words same")
    assert main([a, b]) == 0
    assert capsys.readouterr().out == f"0.0000\t{a}\t{b}\n"


def test_main_missing_file_prints_nothing_on_stdout(tmp_path, capsys):
    a = _write(tmp_path, "a.txt", "x")
    missing = str(tmp_path / "nope.txt")
    assert main([a, missing]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert missing in captured.err