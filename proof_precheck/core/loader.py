# proof_precheck/core/loader.py
import os

TEXT_EXTENSIONS = (".txt", ".md")


def load_text(path: str) -> str:
    ext = os.path.splitext(path.lower())[1]
    if ext not in TEXT_EXTENSIONS:
        raise RuntimeError(f"Only {', '.join(TEXT_EXTENSIONS)} files are supported: {path}")
    # newline="" keeps \r\n intact so offsets match the file as stored
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
        return f.read()
