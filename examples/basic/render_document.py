"""Render a small document and print its fragments."""

from structured_text import (
    Document,
    Heading,
    Hyperlink,
    ListItem,
    Mark,
    Paragraph,
    Text,
    UnorderedList,
    render,
)

doc = Document(
    children=(
        Heading(level=1, children=(Text("Release notes"),)),
        Paragraph(
            children=(
                Text("Read the "),
                Hyperlink("https://example.com/changelog", children=(Text("changelog"),)),
                Text(" for "),
                Text("everything", marks=frozenset({Mark.BOLD, Mark.ITALIC})),
                Text("."),
            )
        ),
        UnorderedList(
            children=(
                ListItem(children=(Paragraph(children=(Text("Faster lists"),)),)),
                ListItem(children=(Paragraph(children=(Text("render()", marks=frozenset({Mark.CODE})),)),)),
            )
        ),
    )
)

for fragment in render(doc):
    print(fragment)
