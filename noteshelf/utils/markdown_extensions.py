"""
Custom Markdown extensions for NoteShelf.
Adds fenced code blocks routed through a syntax highlighter and the GitHub
flavoured constructs Python-Markdown lacks: strikethrough, task lists and bare
URL autolinks.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple
from xml.etree.ElementTree import Element
from markdown.extensions import Extension
from markdown.inlinepatterns import SimpleTagInlineProcessor
from markdown.preprocessors import Preprocessor
from markdown.treeprocessors import Treeprocessor
from markdown.util import AtomicString


QUOTE_MARKER_RE = re.compile(r"^[ ]{0,3}>[ ]?")
FENCE_OPEN_RE = re.compile(r"^(?P<indent>[ ]*)(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
FENCE_CLOSE_RE = re.compile(r"^(?P<indent>[ ]*)(?P<fence>`{3,}|~{3,})[ \t]*$")
LIST_ITEM_RE = re.compile(r"^(?P<indent>[ ]*)(?:[*+-]|\d{1,9}[.)])[ \t]+\S")

STRIKETHROUGH_RE = r"(~{2})(.+?)~{2}"

TASK_ITEM_RE = re.compile(r"^\[([ xX])\][ \t]+")

# \x02 and \x03 delimit Python-Markdown placeholders
BARE_URL_RE = re.compile(
    r"(?:https?://|www\.)[^\s<>\x02\x03]*[^\s<>\x02\x03.,;:!?'\")\]]"
)

_NO_AUTOLINK_TAGS = {"a", "code", "pre", "script", "style"}


def _split_quote(line: str) -> Tuple[int, str]:
    """Return the blockquote depth of a line and the text after its markers."""
    depth = 0
    while True:
        m = QUOTE_MARKER_RE.match(line)
        if not m:
            return depth, line
        depth += 1
        line = line[m.end():]


def _strip_quote(line: str, depth: int) -> Optional[str]:
    """Remove exactly depth quote markers; None when the line has fewer."""
    for _ in range(depth):
        m = QUOTE_MARKER_RE.match(line)
        if not m:
            return None
        line = line[m.end():]
    return line


def _dedent(line: str, width: int) -> str:
    spaces = len(line) - len(line.lstrip(" "))
    return line[min(spaces, width):]


@dataclass
class _Fence:
    """An opening fence line: its container, indentation and language tag."""

    depth: int
    indent: int
    marker: str
    language: Optional[str]
    # Indentation of the placeholder line that replaces the block
    pad: int = 0

    def closes_with(self, line: str) -> bool:
        m = FENCE_CLOSE_RE.match(line)
        return bool(
            m
            and m.group("fence")[0] == self.marker[0]
            and len(m.group("fence")) >= len(self.marker)
            and len(m.group("indent")) < self.indent + 4
        )


class FencedCodePreprocessor(Preprocessor):
    """Replace fenced code blocks with highlighted HTML held in the stash.

    Runs line by line before raw HTML is stashed, so code is never parsed as
    Markdown or HTML. Fences may be indented, sit inside blockquotes or list
    items, close with a longer fence, or stay open to the end of the
    document (or of their blockquote).
    """

    def __init__(self, md, highlighter):
        super().__init__(md)
        self.highlighter = highlighter

    def run(self, lines):
        out: List[str] = []
        i = 0
        while i < len(lines):
            fence = self._open_fence(lines, i)
            if fence is None:
                out.append(lines[i])
                i += 1
                continue

            code, i = self._collect(lines, i + 1, fence)
            result = self.highlighter.highlight_code("\n".join(code), fence.language)
            placeholder = self.md.htmlStash.store(result.html)

            quote = "> " * fence.depth
            blank = quote.rstrip()
            if out and out[-1].strip(" >"):
                out.append(blank)
            out.append(quote + " " * fence.pad + placeholder)

            following = _strip_quote(lines[i], fence.depth) if i < len(lines) else None
            if following is None:
                out.append("")
            elif following.strip():
                out.append(blank)
        return out

    def _open_fence(self, lines: List[str], index: int) -> Optional[_Fence]:
        depth, rest = _split_quote(lines[index])
        m = FENCE_OPEN_RE.match(rest)
        if not m:
            return None

        marker = m.group("fence")
        info = m.group("info").strip()
        if marker[0] == "`" and "`" in info:
            return None

        indent = len(m.group("indent"))
        in_list = indent > 0 and self._in_list_item(lines, index, depth, indent)
        # Four spaces outside a list item is an indented code block
        if indent >= 4 and not in_list:
            return None

        return _Fence(
            depth=depth,
            indent=indent,
            marker=marker,
            language=info.split()[0] if info else None,
            # List continuation needs four spaces in Python-Markdown
            pad=max(indent, 4) if in_list else 0,
        )

    @staticmethod
    def _in_list_item(lines: List[str], index: int, depth: int, indent: int) -> bool:
        """True when an indented fence continues the list item above it."""
        for j in range(index - 1, -1, -1):
            line_depth, rest = _split_quote(lines[j])
            if not rest.strip():
                continue
            if line_depth != depth:
                return False
            item = LIST_ITEM_RE.match(rest)
            if item and len(item.group("indent")) < indent:
                return True
            if not rest.startswith(" "):
                return False
        return False

    @staticmethod
    def _collect(lines: List[str], start: int, fence: _Fence) -> Tuple[List[str], int]:
        """Return the code lines of a fence and the index just past it."""
        code: List[str] = []
        end = len(lines)
        for k in range(start, len(lines)):
            inner = _strip_quote(lines[k], fence.depth)
            if inner is None:
                end = k
                break
            if fence.closes_with(inner):
                return code, k + 1
            code.append(_dedent(inner, fence.indent))

        # Unclosed: trailing blank lines are not part of the code
        while code and not code[-1].strip():
            code.pop()
        return code, end


class FencedCodeExtension(Extension):
    """Markdown extension rendering ``` and ~~~ blocks with a highlighter."""

    def __init__(self, highlighter, **kwargs):
        self.highlighter = highlighter
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        md.registerExtension(self)
        # Same slot as the stock fenced_code extension
        md.preprocessors.register(
            FencedCodePreprocessor(md, self.highlighter), "fenced_code_block", 25
        )


class StrikethroughExtension(Extension):
    """Render ~~text~~ as <del>."""

    def extendMarkdown(self, md):
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_RE, "del"), "strikethrough", 55
        )


class TaskListProcessor(Treeprocessor):
    """Turn list items starting with [ ] or [x] into disabled checkboxes."""

    def run(self, root):
        for li in root.iter("li"):
            target = li
            # Loose lists wrap the item text in a paragraph
            if not (li.text or "").strip() and len(li) and li[0].tag == "p":
                target = li[0]
            text = target.text or ""
            m = TASK_ITEM_RE.match(text)
            if not m:
                continue

            box = Element("input", {"type": "checkbox", "disabled": "disabled"})
            if m.group(1) in ("x", "X"):
                box.set("checked", "checked")
            box.tail = text[m.end():]
            target.text = ""
            target.insert(0, box)
            li.set("class", "task-list-item")


class BareUrlProcessor(Treeprocessor):
    """Link bare http(s):// and www. URLs found in text nodes."""

    def run(self, root):
        self._linkify(root)

    def _linkify(self, parent):
        if parent.tag in _NO_AUTOLINK_TAGS:
            return

        if parent.text and not isinstance(parent.text, AtomicString):
            leading, links = self._split(parent.text)
            if links:
                parent.text = leading
                for offset, link in enumerate(links):
                    parent.insert(offset, link)

        for child in list(parent):
            self._linkify(child)
            if child.tail and not isinstance(child.tail, AtomicString):
                leading, links = self._split(child.tail)
                if links:
                    child.tail = leading
                    index = list(parent).index(child)
                    for offset, link in enumerate(links, start=1):
                        parent.insert(index + offset, link)

    @staticmethod
    def _split(text):
        """Return the text before the first URL and one <a> per URL found."""
        matches = list(BARE_URL_RE.finditer(text))
        if not matches:
            return text, []

        links = []
        for i, m in enumerate(matches):
            url = m.group(0)
            href = url if url.startswith(("http://", "https://")) else f"http://{url}"
            link = Element("a", {"href": href})
            link.text = AtomicString(url)
            end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
            link.tail = text[m.end():end]
            links.append(link)
        return text[: matches[0].start()], links


class GithubFlavorExtension(Extension):
    """Task lists and bare URL autolinks, applied after inline parsing."""

    def extendMarkdown(self, md):
        md.treeprocessors.register(TaskListProcessor(md), "task_list", 18)
        md.treeprocessors.register(BareUrlProcessor(md), "bare_url", 15)
