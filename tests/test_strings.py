import unittest

from puzparse.core.exceptions import MalformedStringSectionError, PuzEncodingError, TruncatedFileError
from puzparse.io.header import read_header
from puzparse.io.strings import decode_text, read_string_sections, section_count, split_strings

from puz_samples import build_header, build_puz


class DecodeTextTests(unittest.TestCase):
    def test_latin1_bytes_become_unicode(self) -> None:
        self.assertEqual(decode_text(b"Caf\xe9"), "Café")

    def test_every_byte_is_valid_latin1(self) -> None:
        self.assertEqual(len(decode_text(bytes(range(256)))), 256)

    def test_strict_charset_failure_raises(self) -> None:
        with self.assertRaises(PuzEncodingError):
            decode_text(b"Caf\xe9", "ascii")

    def test_unknown_charset_raises(self) -> None:
        with self.assertRaises(PuzEncodingError):
            decode_text(b"abc", "no-such-codec")


class SplitStringsTests(unittest.TestCase):
    def test_section_count(self) -> None:
        self.assertEqual(section_count(0), 4)
        self.assertEqual(section_count(76), 80)

    def test_splits_and_counts_trailing_bytes(self) -> None:
        segments, trailing = split_strings(b"one\x00\x00three\x00GEXT", 3)
        self.assertEqual(segments, [b"one", b"", b"three"])
        self.assertEqual(trailing, 4)

    def test_unterminated_final_segment_is_malformed(self) -> None:
        with self.assertRaises(MalformedStringSectionError):
            split_strings(b"one\x00two", 2)

    def test_too_few_segments_is_malformed(self) -> None:
        with self.assertRaises(MalformedStringSectionError):
            split_strings(b"", 1)


class StringSectionTests(unittest.TestCase):
    def _sections(self, data: bytes):
        return read_string_sections(data, read_header(data))

    def test_fixed_order_assignment(self) -> None:
        data = build_puz(
            2,
            2,
            "ABCD",
            ["A", "B", "C", "D"],
            title="Title",
            author="Author",
            copyright="Copy",
            notes="Notes",
        )
        sections = self._sections(data)
        self.assertEqual(sections.title, "Title")
        self.assertEqual(sections.author, "Author")
        self.assertEqual(sections.copyright, "Copy")
        self.assertEqual(sections.clues, (b"A", b"B", b"C", b"D"))
        self.assertEqual(sections.notes, "Notes")
        self.assertEqual(sections.trailing, 0)

    def test_only_title_author_copyright_are_trimmed(self) -> None:
        data = build_puz(
            1,
            1,
            "A",
            ["  spaced clue "],
            num_clues=1,
            title="  Title \t",
            author=" Author ",
            copyright="\r\nCopy ",
            notes=" note ",
        )
        sections = self._sections(data)
        self.assertEqual(sections.title, "Title")
        self.assertEqual(sections.author, "Author")
        self.assertEqual(sections.copyright, "Copy")
        self.assertEqual(sections.clues, (b"  spaced clue ",))
        self.assertEqual(sections.notes, " note ")

    def test_clue_texts_stay_raw_bytes(self) -> None:
        data = build_puz(1, 1, "A", ["Caf\xe9"], title="Ol\xe9")
        sections = self._sections(data)
        self.assertEqual(sections.title, "Olé")
        self.assertEqual(sections.clues, (b"Caf\xe9",))

    def test_extension_sections_are_ignored(self) -> None:
        data = build_puz(1, 1, "A", extra=b"GEXT\x01\x00\x00\x00\x00")
        sections = self._sections(data)
        self.assertEqual(sections.notes, "")
        self.assertEqual(sections.trailing, 9)

    def test_missing_segments_raise(self) -> None:
        data = build_puz(2, 2, "ABCD", num_clues=4, strings=[b"Title", b"Author", b"Copy", b"A"])
        with self.assertRaises(MalformedStringSectionError):
            self._sections(data)

    def test_missing_string_section_is_malformed(self) -> None:
        data = build_header(1, 1, 0) + b"AA"
        with self.assertRaises(MalformedStringSectionError):
            self._sections(data)

    def test_offset_past_end_is_truncated(self) -> None:
        data = build_header(2, 2, 0) + b"AB"
        with self.assertRaises(TruncatedFileError):
            read_string_sections(data, read_header(data))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
