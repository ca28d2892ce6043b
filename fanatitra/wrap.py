"""Greedy word wrapping against a measured width."""


def _split_word(word, max_width, measure):
    """Break a word that cannot fit on a line by itself"""
    chunks = []
    remaining = word
    while remaining:
        split_point = len(remaining)
        for i in range(1, len(remaining) + 1):
            if measure(remaining[:i]) > max_width:
                split_point = i - 1
                break
        if split_point == 0:
            # Not even one character fits; emit the rest as is
            split_point = len(remaining)
        chunks.append(remaining[:split_point])
        remaining = remaining[split_point:]
    return chunks


def wrap_text(text, max_width, measure):
    """
    Wrap text into lines no wider than max_width.

    ``measure`` returns the rendered width of a string in the font that will
    draw it. Words are only broken when a single word is wider than a line;
    the pieces of a broken word each get a line of their own.
    """
    lines = []
    current_line = ''

    for word in text.split():
        test = current_line + (' ' if current_line else '') + word
        if measure(test) <= max_width:
            current_line = test
            continue

        if current_line:
            lines.append(current_line)
            current_line = ''
        if measure(word) <= max_width:
            current_line = word
        else:
            lines.extend(_split_word(word, max_width, measure))

    if current_line:
        lines.append(current_line)
    return lines
