"""Tests for fenced code blocks: verbatim interiors, escaping, unterminated fences."""

from mdpage import convert_body
from mdpage.nodes import CodeBlock
from mdpage.parsing.blocks.code import parse_code_block
from mdpage.renderers.html import render_code_block


class TestParseCodeBlock:
    def test_consumes_through_closing_fence(self) -> None:
        lines = ["```python", "x = 1", "```", "after"]
        block, end = parse_code_block(lines, 0)
        assert block == CodeBlock(language="python", body=("x = 1",))
        assert end == 3
        assert lines[end] == "after"

    def test_body_lines_unmodified(self) -> None:
        lines = ["```", "    four", "\ttab", "", "trailing   ", "```"]
        block, _ = parse_code_block(lines, 0)
        assert block.body == ("    four", "\ttab", "", "trailing   ")

    def test_start_offset(self) -> None:
        lines = ["intro", "```sh", "make", "```"]
        block, end = parse_code_block(lines, 1)
        assert block.language == "sh"
        assert block.body == ("make",)
        assert end == 4

    def test_indented_closing_fence(self) -> None:
        block, end = parse_code_block(["```", "a", "   ```"], 0)
        assert block.body == ("a",)
        assert end == 3


class TestUnterminatedFence:
    """An unclosed fence runs to the end of the document; nothing is lost."""

    def test_extends_to_end(self) -> None:
        lines = ["```", "a", "b"]
        block, end = parse_code_block(lines, 0)
        assert block.body == ("a", "b")
        assert end == len(lines)

    def test_renders_without_error(self) -> None:
        assert convert_body("```\na\n\nb") == "<pre><code>a\n\nb</code></pre>"

    def test_lone_fence(self) -> None:
        assert convert_body("```js") == '<pre><code class="language-js"></code></pre>'


class TestRenderCodeBlock:
    def test_language_class(self) -> None:
        html = render_code_block(CodeBlock(language="python", body=("pass",)))
        assert html == '<pre><code class="language-python">pass</code></pre>'

    def test_no_language_omits_class(self) -> None:
        html = render_code_block(CodeBlock(language="", body=("pass",)))
        assert html == "<pre><code>pass</code></pre>"

    def test_escapes_interior(self) -> None:
        html = render_code_block(CodeBlock(language="", body=("<b>&'\"</b>",)))
        assert html == "<pre><code>&lt;b&gt;&amp;&#x27;&quot;&lt;/b&gt;</code></pre>"

    def test_escapes_language(self) -> None:
        html = render_code_block(CodeBlock(language='x"y', body=()))
        assert 'class="language-x&quot;y"' in html

    def test_full_info_string_kept(self) -> None:
        html = convert_body("```python title=x\nx\n```")
        assert html == '<pre><code class="language-python title=x">x</code></pre>'

    def test_info_string_trimmed(self) -> None:
        code, _ = parse_code_block(["```  go run  ", "x", "```"], 0)
        assert code.language == "go run"


class TestWhitespacePreservation:
    def test_indentation_and_blank_lines(self) -> None:
        source = "```python\ndef f():\n    return 1\n\n\n        deep\n```"
        assert convert_body(source) == (
            '<pre><code class="language-python">'
            "def f():\n    return 1\n\n\n        deep"
            "</code></pre>"
        )

    def test_markdown_inside_fence_is_literal(self) -> None:
        source = "```\n# not a heading\n| a | b |\n|---|---|\n> not a quote\n```"
        html = convert_body(source)
        assert "<h1>" not in html
        assert "<table>" not in html
        assert "<blockquote>" not in html
        assert "&gt; not a quote" in html

    def test_content_after_fence_resumes(self) -> None:
        html = convert_body("```\ncode\n```\n# Title")
        assert html.startswith("<pre><code>code</code></pre>\n")
        assert "<h1>Title</h1>" in html
