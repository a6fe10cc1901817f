from academy.adapters.pdf.pypdf2_cropper import LoadedDocument, PyPDF2DocumentCropper

__all__ = ["LoadedDocument", "PyPDF2DocumentCropper"]
