"""Default configuration values for CodeVanta."""

# Language tags reported for project files
LANG_MAP = {
    ".py": "python",
    ".js": "javascript",
    ".mjs": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".jsx": "javascript",
    ".json": "json",
    ".md": "markdown",
    ".markdown": "markdown",
    ".html": "html",
    ".htm": "html",
    ".css": "css",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".toml": "toml",
    ".sh": "bash",
    ".sql": "sql",
    ".java": "java",
    ".xml": "xml",
    ".txt": "text",
}

# Glyph shown next to each file by `ls`, keyed by lowercased extension
FILE_GLYPHS = {
    "js": "⚡",
    "py": "🐍",
    "java": "☕",
    "html": "🌐",
    "htm": "🌐",
    "css": "🎨",
    "json": "📄",
    "md": "📝",
    "markdown": "📝",
    "jsx": "⚛️",
    "tsx": "⚛️",
    "ts": "📘",
    "xml": "📋",
    "txt": "📄",
}
DEFAULT_GLYPH = "📄"

HTML_EXTENSIONS = frozenset({"html", "htm"})

DEFAULT_PROMPT_DIRECTORY = "~/codevanta"
DEFAULT_PRODUCT_NAME = "CodeVanta AI Terminal"
DEFAULT_VERSION = "3.0.0"

DEFAULT_IGNORED_DIRS = (
    ".git",
    "node_modules",
    "__pycache__",
    ".venv",
    "venv",
    "dist",
    "build",
)
DEFAULT_MAX_FILE_SIZE = 1024 * 1024
