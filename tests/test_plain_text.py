from adfmark.utils.plain_text import adf_to_text, text_to_adf


def _doc(*content):
    return {'type': 'doc', 'version': 1, 'content': list(content)}


def _paragraph(*content):
    return {'type': 'paragraph', 'content': list(content)}


def _text(text):
    return {'type': 'text', 'text': text}


HARD_BREAK = {'type': 'hardBreak'}


class TestTextToAdf:
    def test_wraps_plain_text(self):
        assert text_to_adf('Hello, world!') == _doc(_paragraph(_text('Hello, world!')))

    def test_blank_line_starts_a_new_paragraph(self):
        assert text_to_adf('First paragraph.\n\nSecond paragraph.') == _doc(
            _paragraph(_text('First paragraph.')),
            _paragraph(_text('Second paragraph.')),
        )

    def test_single_newline_is_a_hard_break(self):
        assert text_to_adf('Line one\nLine two') == _doc(_paragraph(_text('Line one'), HARD_BREAK, _text('Line two')))

    def test_mixed_paragraphs_and_line_breaks(self):
        assert text_to_adf('Para 1 line 1\nPara 1 line 2\n\nPara 2') == _doc(
            _paragraph(_text('Para 1 line 1'), HARD_BREAK, _text('Para 1 line 2')),
            _paragraph(_text('Para 2')),
        )

    def test_runs_of_blank_lines_give_no_empty_paragraphs(self):
        assert text_to_adf('Before\n\n\n\nAfter') == _doc(_paragraph(_text('Before')), _paragraph(_text('After')))

    def test_leading_and_trailing_blank_lines_are_dropped(self):
        adf = text_to_adf('\n\nHello\n\n')

        assert adf == _doc(_paragraph(_text('Hello')))
        assert adf_to_text(adf) == 'Hello'

    def test_windows_line_endings(self):
        assert text_to_adf('a\r\nb\r\n\r\nc') == _doc(
            _paragraph(_text('a'), HARD_BREAK, _text('b')),
            _paragraph(_text('c')),
        )

    def test_markdown_syntax_is_kept_verbatim(self):
        assert text_to_adf('**not bold**') == _doc(_paragraph(_text('**not bold**')))

    def test_empty_text(self):
        assert text_to_adf('') == _doc()


class TestAdfToText:
    def test_simple_paragraph(self):
        assert adf_to_text(_doc(_paragraph(_text('Hello, world!')))) == 'Hello, world!'

    def test_none_input(self):
        assert adf_to_text(None) == ''

    def test_empty_document(self):
        assert adf_to_text(_doc()) == ''

    def test_paragraphs_are_separated_by_a_blank_line(self):
        adf = _doc(_paragraph(_text('First paragraph.')), _paragraph(_text('Second paragraph.')))

        assert adf_to_text(adf) == 'First paragraph.\n\nSecond paragraph.'

    def test_hard_break_is_a_newline(self):
        assert adf_to_text(_doc(_paragraph(_text('a'), HARD_BREAK, _text('b')))) == 'a\nb'

    def test_marks_are_ignored(self):
        node = {'type': 'text', 'text': 'bold', 'marks': [{'type': 'strong'}]}

        assert adf_to_text(_doc(_paragraph(_text('a '), node))) == 'a bold'

    def test_text_of_other_blocks_is_extracted(self):
        adf = _doc(
            {'type': 'heading', 'attrs': {'level': 1}, 'content': [_text('Title')]},
            {'type': 'codeBlock', 'content': [_text('x = 1')]},
            {'type': 'panel', 'content': [_paragraph(_text('inside'))]},
        )

        assert adf_to_text(adf) == 'Title\n\nx = 1\n\ninside'
