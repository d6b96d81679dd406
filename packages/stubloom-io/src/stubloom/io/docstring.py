def _escape(doc: str) -> str:
    text = doc.replace("\\", "\\\\")
    trailing_quote = text.endswith('"')
    if trailing_quote:
        text = text[:-1]
    text = text.replace('"""', '\\"\\"\\"')
    if trailing_quote:
        text += '\\"'
    return text


def format_docstring(doc: str, indent: str) -> str:
    """
    Render `doc` as a triple-quoted block at `indent`.

    Single-line text stays on one line; multi-line text opens and closes the
    quotes on their own lines.
    """
    text = _escape(doc.strip())
    if "\n" not in text:
        return f'{indent}"""{text}"""'

    lines = [f'{indent}"""']
    for line in text.splitlines():
        lines.append(f"{indent}{line}".rstrip())
    lines.append(f'{indent}"""')
    return "\n".join(lines)
