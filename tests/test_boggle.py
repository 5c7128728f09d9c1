import io
import string

import pytest

from hashboggle.boggle import boggle, format_board, gen_board, main, parse_dict, print_board


def _dict_file(tmp_path, text):
    path = tmp_path / "words.txt"
    path.write_text(text)
    return str(path)


def test_gen_board_shape_and_letters():
    board = gen_board(5, 42)
    assert len(board) == 5
    assert all(len(row) == 5 for row in board)
    assert all(letter in string.ascii_uppercase for row in board for letter in row)


def test_gen_board_deterministic_for_seed():
    # The first draw for seed 5489 is 3499211612, index 92 of the 98 tiles: "W".
    assert gen_board(1, 5489) == [["W"]]
    first = gen_board(6, 7)
    second = gen_board(6, 7)
    assert len(first) == 6
    assert first == second


def test_gen_board_seeds_differ():
    assert gen_board(8, 1) != gen_board(8, 2)


def test_gen_board_zero_size():
    assert gen_board(0, 3) == []


def test_format_board():
    assert format_board([["A", "B"], ["C", "D"]]) == " A B\n C D\n"


def test_print_board_writes_format():
    board = gen_board(4, 9)
    out = io.StringIO()
    print_board(board, out)
    assert out.getvalue() == format_board(board)


def test_parse_dict_words_and_prefixes(tmp_path):
    dictionary, prefix = parse_dict(_dict_file(tmp_path, "cat dog\ncats\n"))
    assert dictionary == {"cat", "dog", "cats"}
    assert prefix == {"", "c", "ca", "cat", "d", "do"}


def test_parse_dict_missing_file(tmp_path):
    with pytest.raises(ValueError):
        parse_dict(str(tmp_path / "missing.txt"))


def test_boggle_row_keeps_longest(tmp_path):
    dictionary, prefix = parse_dict(_dict_file(tmp_path, "CA CAT"))
    board = [["C", "A", "T"], ["X", "X", "X"], ["X", "X", "X"]]
    assert boggle(dictionary, prefix, board) == {"CAT"}


def test_boggle_shorter_word_when_longer_fails(tmp_path):
    dictionary, prefix = parse_dict(_dict_file(tmp_path, "CA CAX"))
    board = [["C", "A", "T"], ["Y", "Y", "Y"], ["Y", "Y", "Y"]]
    assert boggle(dictionary, prefix, board) == {"CA"}


def test_boggle_column_and_diagonal(tmp_path):
    dictionary, prefix = parse_dict(_dict_file(tmp_path, "DOG CAT"))
    board = [["D", "Z", "C"], ["O", "A", "Z"], ["G", "Z", "T"]]
    # DOG reads down the first column; C-A-T is not on any forward line.
    assert boggle(dictionary, prefix, board) == {"DOG"}
    diag = [["C", "Z", "Z"], ["Z", "A", "Z"], ["Z", "Z", "T"]]
    assert boggle(dictionary, prefix, diag) == {"CAT"}


def test_boggle_does_not_read_backwards(tmp_path):
    dictionary, prefix = parse_dict(_dict_file(tmp_path, "TAC"))
    board = [["C", "A", "T"], ["X", "X", "X"], ["X", "X", "X"]]
    assert boggle(dictionary, prefix, board) == set()


def test_boggle_results_are_dictionary_words(tmp_path):
    words = "A I AN AT IT TO ON NO IN EAT TEA ATE ONE TEN NET"
    dictionary, prefix = parse_dict(_dict_file(tmp_path, words))
    found = boggle(dictionary, prefix, gen_board(10, 5))
    assert found <= dictionary


def test_main_usage(capsys):
    assert main(["4", "1"]) == 1
    assert "Usage: boggle-driver" in capsys.readouterr().out


def test_main_output(tmp_path, capsys):
    path = _dict_file(tmp_path, "A I AN AT IT TO ON NO IN EAT TEA")
    assert main(["6", "3", path]) == 0
    out = capsys.readouterr().out
    board = gen_board(6, 3)
    dictionary, prefix = parse_dict(path)
    found = boggle(dictionary, prefix, board)
    expected = format_board(board) + f"Found {len(found)} words:\n" + ", ".join(sorted(found)) + "\n"
    assert out == expected