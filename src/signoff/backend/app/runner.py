import subprocess
import sys
from pathlib import Path


def run(host: str = "0.0.0.0", port: int = 8000):
    pkg_dir = Path(__file__).resolve().parent
    main_path = pkg_dir / "main.py"
    if not main_path.exists():
        raise FileNotFoundError(f"No main.py found in {main_path}")

    api_cmd = [
        sys.executable,
        "-m", "uvicorn",
        "signoff.backend.app.main:app",
        "--host", host,
        "--port", str(port),
    ]

    print(f"Starting API on http://localhost:{port}")
    return subprocess.Popen(api_cmd)
