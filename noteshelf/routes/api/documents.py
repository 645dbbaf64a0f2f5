"""
Document API routes for NoteShelf.
Returns directory listings and rendered documents as JSON.
"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from ...models.document import DirectoryListing, RenderedDocument
from ...services.document_service import DocumentService
from ...utils.markdown_renderer import get_renderer
from ...utils.validation import is_safe_path_segment

router = APIRouter()


@router.get("/directories")
async def list_directories():
    """List the configured directory keys in authored order."""
    return {"directories": DocumentService.list_directories()}


@router.get("/directories/{directory}", response_model=DirectoryListing)
async def list_documents(directory: str):
    """List the documents of a directory. Unknown directories are empty."""
    return DocumentService.list_documents(directory)


@router.get("/documents/{directory}/{filename}", response_model=RenderedDocument)
async def get_document(directory: str, filename: str):
    """
    Render a document to HTML.

    Load failures are not errors: the response carries the rendered
    placeholder with loaded set to false.
    """
    if not is_safe_path_segment(directory) or not is_safe_path_segment(filename):
        raise HTTPException(status_code=404, detail="Document not found")
    return await DocumentService.get_document(directory, filename)


@router.get("/highlight.css")
async def highlight_stylesheet():
    """Serve the Pygments stylesheet for highlighted code blocks."""
    return Response(content=get_renderer().stylesheet(), media_type="text/css")
