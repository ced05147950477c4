#!/usr/bin/env python3
"""Start script that runs the map API under uvicorn, honouring the PORT environment variable."""

import os
import sys
import subprocess

port = os.environ.get("PORT", "8000")

try:
    port_int = int(port)
except ValueError:
    print(f"Warning: Invalid PORT value '{port}', using default 8000", file=sys.stderr)
    port_int = 8000

# Make the src layout importable without an editable install
src_path = os.path.abspath("src")
if not os.path.isdir(src_path):
    print(f"Warning: src directory not found at {src_path}", file=sys.stderr)
    src_path = os.getcwd()

pythonpath = os.environ.get("PYTHONPATH", "")
os.environ["PYTHONPATH"] = f"{src_path}:{pythonpath}" if pythonpath else src_path
sys.path.insert(0, src_path)

cmd = [
    sys.executable,
    "-m",
    "uvicorn",
    "placemap.main:app",
    "--host",
    "0.0.0.0",
    "--port",
    str(port_int),
    "--proxy-headers",
    "--forwarded-allow-ips", "*",
]

print(f"Starting server on port {port_int}...", file=sys.stderr)
print(f"PYTHONPATH={os.environ['PYTHONPATH']}", file=sys.stderr)

# Check if the app module can be imported before starting
try:
    import placemap.main  # noqa: F401
    print("✅ Successfully imported placemap.main", file=sys.stderr)
except Exception as e:
    print(f"❌ Failed to import placemap.main ({type(e).__name__}): {e}", file=sys.stderr)
    import traceback
    traceback.print_exc(file=sys.stderr)
    sys.exit(1)

try:
    result = subprocess.call(cmd)
    if result != 0:
        print(f"❌ Uvicorn exited with code {result}", file=sys.stderr)
    sys.exit(result)
except KeyboardInterrupt:
    print("⚠️ Server interrupted by user", file=sys.stderr)
    sys.exit(0)
