# run_dev.py
import os
import sys
import asyncio
import socket


# Windows: Proactor para evitar errores de socket con --reload
if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsProactorEventLoopPolicy())


# Carga .env si existe (SECRET_KEY, DATABASE_URL, ...)
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv(".env")


APP_FACTORY = os.getenv("APP_FACTORY", "app.main:create_app")


def _lan_ip() -> str:
    """Obtiene IP LAN real sin depender de hostname/DNS."""
    try:
        s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        s.connect(("8.8.8.8", 80))
        ip = s.getsockname()[0]
        s.close()
        return ip
    except OSError:
        return "127.0.0.1"


def main():
    import uvicorn

    if not (os.getenv("SECRET_KEY") or os.getenv("JWT_SECRET")):
        print("❌ Falta SECRET_KEY (o JWT_SECRET) en el entorno / .env")
        sys.exit(1)

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))

    reload_env = os.getenv("RELOAD")
    if reload_env is not None:
        reload_flag = reload_env.strip() in ("1", "true", "True", "yes", "on")
    else:
        # en Windows mejor sin reload mientras se sirven videos
        reload_flag = not sys.platform.startswith("win")

    print(f"🔗 API local: http://127.0.0.1:{port}")
    print(f"📱 API LAN:   http://{_lan_ip()}:{port}")
    print(f"🌀 reload={'ON' if reload_flag else 'OFF'}")

    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=host,
        port=port,
        loop="asyncio",
        reload=reload_flag,
        reload_dirs=["app"],
        reload_excludes=[".venv", ".git", "__pycache__", "videos"],
        timeout_keep_alive=30,
        timeout_graceful_shutdown=15,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
        lifespan="on",
    )


if __name__ == "__main__":
    main()
