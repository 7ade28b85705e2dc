"""
Tests for the word list driver.
"""

import pytest

from stem_wordlist import load_words, main, stem_lengths


@pytest.fixture
def wordlist(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("schönes\n\n  Häuser \nWasser\n", encoding="utf-8")
    return path


class TestLoadWords:
    """Reading word lists and running text"""

    def test_one_word_per_line(self, wordlist):
        assert list(load_words(wordlist)) == ["schönes", "Häuser", "Wasser"]

    def test_running_text(self, tmp_path):
        path = tmp_path / "text.txt"
        path.write_text("Die Kinder spielen.\nIm Wasser!\n", encoding="utf-8")
        assert list(load_words(path, text=True)) == ["Die", "Kinder", "spielen", "Im", "Wasser"]


class TestStemLengths:
    """Stem lengths used for the benchmark total"""

    def test_lengths(self):
        # schon, hau, wass
        lengths = stem_lengths(["schönes", "Häuser", "Wasser"])
        assert lengths.tolist() == [5, 3, 4]

    def test_lengths_are_utf8_bytes(self):
        # "café" keeps its é, two bytes in utf-8
        assert stem_lengths(["Café"]).tolist() == [5]

    def test_empty(self):
        assert stem_lengths([]).size == 0


class TestCli:
    """Command line entry point"""

    def test_prints_total(self, wordlist, capsys):
        main([str(wordlist)])
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "12"
        assert out[-1].startswith("Elapsed time:")

    def test_output_file(self, wordlist, tmp_path):
        out = tmp_path / "stems.txt"
        main([str(wordlist), "--output", str(out)])
        assert out.read_text(encoding="utf-8") == "schönes\tschon\nHäuser\thau\nWasser\twass\n"

    def test_case_insensitive(self, tmp_path, capsys):
        path = tmp_path / "words.txt"
        path.write_text("Arbeitet\n", encoding="utf-8")
        main([str(path), "--case-insensitive"])
        assert capsys.readouterr().out.splitlines()[0] == "5"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit, match="file not found"):
            main([str(tmp_path / "nope.txt")])
