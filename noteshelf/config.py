"""
Configuration module for NoteShelf.
Centralizes all configuration settings and environment variables.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent

# Server configuration
PORT = int(os.getenv("PORT", "8000"))
DEV = os.getenv("DEV", "false").lower() == "true"
HOST = os.getenv("HOST", "0.0.0.0")

# Application settings
APP_TITLE = "NoteShelf"
APP_DESCRIPTION = "Markdown notes rendered with highlighted code"

# Name shown on all pages
NAME = os.getenv("SITE_NAME", "NoteShelf")

VERSION = "1.0"

# Content settings
# Directory the Markdown files are served from, mounted at CONTENT_URL_PATH
CONTENT_DIR = os.getenv("CONTENT_DIR", "content")
CONTENT_URL_PATH = "/content"
# Root the fetcher builds resource paths from
CONTENT_ROOT = os.getenv("CONTENT_ROOT", f"http://127.0.0.1:{PORT}{CONTENT_URL_PATH}")
CONTENT_ACCEPT = "text/plain; charset=utf-8"
DOCUMENT_SUFFIX = ".md"

# Unset means no timeout: stalls are left to the transport's defaults
_fetch_timeout = os.getenv("FETCH_TIMEOUT")
FETCH_TIMEOUT = float(_fetch_timeout) if _fetch_timeout else None

FALLBACK_CONTENT = "# 文件加载失败\n\n无法加载指定的文件内容。"

# Directory index settings
DIRECTORY_INDEX_FILE = os.getenv("DIRECTORY_INDEX_FILE")
DEFAULT_DIRECTORY_INDEX = {
    "interview": [
        "前言.md",
        "美团二面(4.22).md",
        "淘天二面(4.24).md",
        "淘天hr面(5.7).md",
        "美团一面(5.7).md",
        "美团二面(5.8).md",
    ],
    "knowledge": [
        "前言.md",
        "CSS.md",
        "JS.md",
        "Vue.md",
        "浏览器.md",
        "计网.md",
        "面试题.md",
        "js手写.md",
        "字符串操作.md",
    ],
}

# Rendering settings
HIGHLIGHT_STYLE = os.getenv("HIGHLIGHT_STYLE", "default")
HIGHLIGHT_CSS_SELECTOR = ".hljs"
SANITIZE_HTML = os.getenv("SANITIZE_HTML", "false").lower() == "true"

# Logging settings
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_RETENTION = "7 days"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
REQUEST_LOGGING_ENABLED = os.getenv("REQUEST_LOGGING_ENABLED", "true").lower() == "true"

# Template settings
TEMPLATE_DIR = str(PACKAGE_DIR / "templates")
