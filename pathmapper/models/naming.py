"""
Name model - a normalized identifier split into word pieces.

Formatters receive a Name instead of a raw string so that every language can
render the same package segment in its own casing convention.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Name:
    """An identifier made of one or more word pieces in their original casing."""
    pieces: Tuple[str, ...]
    original: Optional[str] = field(default=None, compare=False)

    @classmethod
    def upper_camel(cls, *identifiers: str) -> "Name":
        """
        Build a Name from upper-camel-like identifiers.

        Input is not required to be strictly upper camel: lowercase words,
        acronyms, non-ASCII letters and punctuation are all accepted. Letters
        and digits are never dropped, and the identifiers are kept verbatim
        for to_original(). An identifier without any word is kept whole so
        the result is never empty.
        """
        pieces = []
        for identifier in identifiers:
            words = _split_words(identifier)
            if words:
                pieces.extend(words)
            elif identifier:
                pieces.append(identifier)
        return cls(tuple(pieces), "".join(identifiers))

    def to_lower_underscore(self) -> str:
        return "_".join(piece.lower() for piece in self.pieces)

    def to_upper_camel(self) -> str:
        return "".join(_capitalize(piece) for piece in self.pieces)

    def to_lower_camel(self) -> str:
        if not self.pieces:
            return ""
        head, *rest = self.pieces
        return head.lower() + "".join(_capitalize(piece) for piece in rest)

    def to_original(self) -> str:
        if self.original is not None:
            return self.original
        return "".join(self.pieces)

    def __str__(self) -> str:
        return self.to_original()


def _split_words(identifier: str) -> List[str]:
    """
    Split at case boundaries and at any character that is not a letter or digit.

    Acronym runs stay together (HTTPServer -> HTTP, Server) and trailing
    digits stay with the word before them (v1beta2 -> v1, beta2).
    """
    words = []
    current = ""
    for char in identifier:
        if char.isdigit():
            current += char
        elif char.isalpha():
            if not current:
                current = char
            elif current[-1].isdigit():
                words.append(current)
                current = char
            elif char.isupper() or char.istitle():
                if current[-1].isupper():
                    current += char
                else:
                    words.append(current)
                    current = char
            elif len(current) > 1 and current[-1].isupper() and current[-2].isupper():
                # End of an acronym: its last capital starts the next word
                words.append(current[:-1])
                current = current[-1] + char
            else:
                current += char
        else:
            if current:
                words.append(current)
            current = ""
    if current:
        words.append(current)
    return words


def _capitalize(piece: str) -> str:
    return piece[:1].upper() + piece[1:].lower()
