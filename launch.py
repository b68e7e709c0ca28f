"""
Launch script for the BC Rental Contract Analyzer API
"""

import sys
import time
import subprocess
import requests
from config.settings import settings


HEALTH_URL = f"http://127.0.0.1:{settings.PORT}{settings.API_PREFIX}/health"


def wait_for_api(retries: int = 10, delay: float = 1.0) -> bool:
    """Poll the health endpoint until the API answers"""
    for _ in range(retries):
        try:
            response = requests.get(HEALTH_URL, timeout = 5)
            if response.status_code == 200:
                return True
        except requests.RequestException:
            pass

        time.sleep(delay)

    return False


def start_api() -> subprocess.Popen:
    """Start the FastAPI server with uvicorn"""
    print("=" * 60)
    print("Starting FastAPI Server...")
    print("=" * 60)

    return subprocess.Popen([sys.executable, "-m", "uvicorn",
                             "app:app",
                             "--host", settings.HOST,
                             "--port", str(settings.PORT),
                            ])


def main():
    """Main launch function"""
    process = start_api()

    if not wait_for_api():
        print("✗ Failed to start API server")
        process.terminate()
        sys.exit(1)

    print(f"✓ API Server running at: http://localhost:{settings.PORT}")
    print(f"✓ Documentation at: http://localhost:{settings.PORT}/api/docs")
    print("\nPress Ctrl+C to stop")

    try:
        process.wait()
    except KeyboardInterrupt:
        print("\nShutting down...")
        process.terminate()
        sys.exit(0)


if __name__ == "__main__":
    main()
