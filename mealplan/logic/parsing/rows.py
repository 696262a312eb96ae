"""Single-line CSV tokenizer with quoted fields, embedded commas and "" escapes."""
from typing import List


def parse_row(line: str) -> List[str]:
    '''
    Splits one CSV line into trimmed fields.

    A double quote toggles quote mode; inside quotes a doubled quote is a literal quote
    and commas are kept. The last field is always emitted, so "a," yields ["a", ""].
    '''
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    while i < len(line):
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 2
                continue
            in_quotes = not in_quotes
        elif char == ',' and not in_quotes:
            fields.append(''.join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1
    fields.append(''.join(current).strip())
    return fields


__all__ = ['parse_row']
