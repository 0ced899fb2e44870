# backend/config.py
import os
from pathlib import Path
from dotenv import load_dotenv

# --- Load env from backend/.env OR .env (whichever exists) ---
# Works whether you run from repo root or backend/
root = Path(__file__).resolve().parents[1]          # project root
backend_env = root / "backend" / ".env"
root_env = root / ".env"
if backend_env.exists():
    load_dotenv(backend_env)
elif root_env.exists():
    load_dotenv(root_env)

# === 🔐 Secrets (optional: without a key the local generators are used) ===
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

# === ⚙️ Model Configuration ===
DEFAULT_MODEL = os.getenv("DEFAULT_MODEL", "gpt-4o-mini")
MAX_TOKENS = int(os.getenv("MAX_TOKENS", "3000"))
OPENAI_TIMEOUT_SECS = float(os.getenv("OPENAI_TIMEOUT_SECS", "30"))

# === 🌐 Profile validation services ===
GITHUB_TOKEN = os.getenv("GITHUB_TOKEN")
PROXYCURL_API_KEY = os.getenv("PROXYCURL_API_KEY")
HTTP_TIMEOUT_SECS = float(os.getenv("HTTP_TIMEOUT_SECS", "10"))

# === 📄 Uploads ===
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))

# === 🌍 CORS Settings ===
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173"
    ).split(",")
    if origin.strip()
]


# === 🚀 Feature Toggles (read per call so tests / reloads see env changes) ===
def is_demo_mode() -> bool:
    """Demo mode answers every request from the local generators."""
    return os.getenv("DEMO_MODE", "false").strip().lower() == "true"


def ai_enabled() -> bool:
    return bool((os.getenv("OPENAI_API_KEY") or "").strip())
