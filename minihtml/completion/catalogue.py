"""
Completion catalogue.

Fixed snippets for the seven structural elements. Pure data: it never
looks at document state or validation results.
"""

from minihtml.ir.schema import CompletionItem

TRIGGER_CHARACTERS = ("<", "/")

_CATALOGUE = (
    CompletionItem(
        label="html",
        detail="Mini HTML document root",
        insert_text="<html>\n  ${1:head}\n  ${2:body}\n</html>",
        documentation="Mini HTML document root element",
    ),
    CompletionItem(
        label="head",
        detail="Document head section",
        insert_text="<head>\n  ${1:meta or title}\n</head>",
        documentation="Document head - contains meta tags or title",
    ),
    CompletionItem(
        label="body",
        detail="Document body section",
        insert_text="<body>\n  ${1:div or span}\n</body>",
        documentation="Document body - contains div or span elements",
    ),
    CompletionItem(
        label="title",
        detail="Document title",
        insert_text="<title>${1:Page Title}</title>",
        documentation="Page title - contains only text",
    ),
    CompletionItem(
        label="meta",
        detail="Meta tag",
        insert_text='<meta ${1:property="value"}>',
        documentation="Meta information tag",
    ),
    CompletionItem(
        label="div",
        detail="Division container",
        insert_text="<div>\n  ${1:div, span or text}\n</div>",
        documentation="Container that can hold div, span, or text",
    ),
    CompletionItem(
        label="span",
        detail="Inline container",
        insert_text="<span>${1:span or text}</span>",
        documentation="Inline container that can hold span or text (not div)",
    ),
)


def get_completions() -> list[CompletionItem]:
    """Return the catalogue in a fixed order."""
    return [item.model_copy() for item in _CATALOGUE]
