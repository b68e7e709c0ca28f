# DEPENDENCIES
import re
from typing import Any
from typing import Dict


class TextProcessor:
    """
    Text processing and normalization utilities
    """
    @staticmethod
    def clean_extracted_text(text: str) -> str:
        """
        Clean text pulled out of a document while keeping line structure

        Arguments:
        ----------
            text { str } : Raw extracted text

        Returns:
        --------
              { str }    : Text with NUL bytes removed and runs of spaces/tabs collapsed on each line
        """
        text  = text.replace("\x00", "").replace("\r\n", "\n").replace("\r", "\n")
        lines = [re.sub(r'[ \t\f\v]+', ' ', line).strip() for line in text.split("\n")]

        # Collapse 3+ blank lines into a single paragraph break
        return re.sub(r'\n{3,}', '\n\n', "\n".join(lines)).strip()


    @staticmethod
    def extract_context(text: str, start: int, length: int, window: int = 100) -> str:
        """
        Excerpt of `text` around a span, clamped to the text boundaries and wrapped in ellipses

        Arguments:
        ----------
            text   { str } : Original text

            start  { int } : Offset of the span

            length { int } : Span length

            window { int } : Characters kept on each side of the span

        Returns:
        --------
               { str }     : "..." + excerpt + "..."
        """
        begin = max(0, start - window)
        end   = min(len(text), start + length + window)

        return "..." + text[begin:end] + "..."


    @staticmethod
    def count_words(text: str) -> int:
        """
        Count words in text
        """
        return len(text.split())


    @staticmethod
    def get_text_statistics(text: str) -> Dict[str, Any]:
        """
        Basic text statistics used in analysis metadata
        """
        return {"char_count"      : len(text),
                "word_count"      : TextProcessor.count_words(text),
                "line_count"      : len(text.split('\n')) if text else 0,
                "paragraph_count" : len([p for p in re.split(r'\n\s*\n', text) if p.strip()]),
               }
