import uvicorn
import threading
import time
import requests
import os

# Determine environment: "prod" or "local"
ENV = os.getenv("ENV", "local").lower()

# Default settings
HOST = "localhost"
PORT = int(os.getenv("PORT", "8000"))
RELOAD = True  # Enable live reload in local development

# Production config
if ENV == "prod":
    HOST = "0.0.0.0"
    RELOAD = False
    KEEP_ALIVE_URL = os.getenv("KEEP_ALIVE_URL", f"http://localhost:{PORT}/ping")
    PING_INTERVAL_SECONDS = 10 * 60  # 10 minutes

    def keep_alive():
        """Periodically ping the service so the host does not idle it out."""
        while True:
            try:
                response = requests.get(KEEP_ALIVE_URL, timeout=10)
                print(f"[KeepAlive] Pinged {KEEP_ALIVE_URL}: status {response.status_code}")
            except requests.RequestException as e:
                print(f"[KeepAlive] Failed to ping {KEEP_ALIVE_URL}: {e}")
            time.sleep(PING_INTERVAL_SECONDS)

    threading.Thread(target=keep_alive, daemon=True).start()
else:
    print("[Info] Running in local mode, keep-alive disabled.")

if __name__ == "__main__":
    uvicorn.run("campus_wellness.main:app", host=HOST, port=PORT, reload=RELOAD)
