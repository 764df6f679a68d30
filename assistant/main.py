import logging

import uvicorn
from assistant.api.api_run import app
from assistant.utilities.config import APP_HOST, APP_PORT, DEBUG, LOG_LEVEL
from assistant.utilities.network import get_local_ip


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    local_url = f"http://localhost:{APP_PORT}"
    # Friendly pointer to the chat page
    print(f"Assistant running on {local_url} (Press CTRL+C to quit)")
    local_ip = get_local_ip()
    if APP_HOST == "0.0.0.0" and local_ip not in ("127.0.0.1", "localhost"):
        print(f"Accessible from other devices at: http://{local_ip}:{APP_PORT}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
