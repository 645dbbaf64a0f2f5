"""
Document browsing routes for NoteShelf.
Serves the navigation and rendered documents as HTML pages.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from ...services.document_service import DocumentService
from ...utils.template_env import get_templates
from ...utils.validation import is_safe_path_segment

router = APIRouter()

templates = get_templates()


@router.get("/", response_class=HTMLResponse, name="home")
async def home(request: Request):
    """List every directory with its documents."""
    listings = [
        DocumentService.list_documents(directory)
        for directory in DocumentService.list_directories()
    ]
    return templates.TemplateResponse(
        request, "index.html", {"listings": listings}
    )


async def _render_docs_page(request: Request, directory: str, filename: Optional[str]):
    if not is_safe_path_segment(directory):
        raise HTTPException(status_code=404, detail="Directory not found")
    listing = DocumentService.list_documents(directory)

    if filename is None and listing.files:
        filename = listing.files[0].filename

    document = None
    if filename is not None:
        if not is_safe_path_segment(filename):
            raise HTTPException(status_code=404, detail="Document not found")
        document = await DocumentService.get_document(directory, filename)

    return templates.TemplateResponse(
        request,
        "document.html",
        {
            "listing": listing,
            "document": document,
            "current_file": filename,
        },
    )


@router.get("/docs/{directory}", response_class=HTMLResponse)
async def view_directory(request: Request, directory: str):
    """Show a directory, opening its first document."""
    return await _render_docs_page(request, directory, None)


@router.get("/docs/{directory}/{filename}", response_class=HTMLResponse)
async def view_document(request: Request, directory: str, filename: str):
    """Show one document next to its directory's navigation."""
    return await _render_docs_page(request, directory, filename)
