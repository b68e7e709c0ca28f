# DEPENDENCIES
import io
from typing import Union
from typing import BinaryIO
from pathlib import Path
from PyPDF2 import PdfReader
from utils.logger import log_info
from utils.text_processor import TextProcessor


class DocumentReadError(ValueError):
    """
    Raised when a document cannot be turned into text
    """
    pass


class DocumentReader:
    """
    Extract plain text from uploaded rental contracts (PDF or TXT)
    """
    SUPPORTED_EXTENSIONS = ("pdf", "txt")


    def read_file(self, file_obj: Union[BinaryIO, bytes], file_extension: str) -> str:
        """
        Read a contract file and return its text

        Arguments:
        ----------
            file_obj       { BinaryIO } : Binary file object (or raw bytes)

            file_extension    { str }   : Extension with or without the leading dot

        Returns:
        --------
                     { str }            : Extracted, cleaned text
        """
        extension = file_extension.lower().lstrip(".")

        if extension not in self.SUPPORTED_EXTENSIONS:
            raise DocumentReadError(f"Unsupported file type: '{file_extension}'. Supported: {', '.join(self.SUPPORTED_EXTENSIONS)}")

        data      = file_obj if isinstance(file_obj, (bytes, bytearray)) else file_obj.read()

        if (extension == "pdf"):
            text = self._read_pdf(data)

        else:
            text = self._read_txt(data)

        text      = TextProcessor.clean_extracted_text(text)

        log_info("Document read", file_type = extension, bytes = len(data), characters = len(text))

        return text


    def read_path(self, path: Union[str, Path]) -> str:
        """
        Read a contract file from disk
        """
        path = Path(path)

        with open(path, "rb") as fh:
            return self.read_file(fh, path.suffix)


    @staticmethod
    def _read_pdf(data: bytes) -> str:
        try:
            reader = PdfReader(io.BytesIO(data))
            pages  = [page.extract_text() or "" for page in reader.pages]

        except Exception as e:
            raise DocumentReadError(f"Could not read PDF document: {e}") from e

        return "\n".join(pages)


    @staticmethod
    def _read_txt(data: bytes) -> str:
        try:
            return data.decode("utf-8")

        except UnicodeDecodeError:
            return data.decode("utf-8", errors = "replace")
