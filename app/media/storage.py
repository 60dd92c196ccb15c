import os
import time
import uuid
import shutil

from fastapi import UploadFile


def _new_name(filename: str | None) -> str:
    """
    Nombre único generado por el server: <epoch-ms>-<hex><ext>.
    El sufijo aleatorio evita choques entre uploads del mismo milisegundo.
    """
    ext = os.path.splitext(filename or "")[1].lower() or ".bin"
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}{ext}"


def save_upload(file: UploadFile, videos_dir: str, url_prefix: str = "/videos") -> str:
    """
    Copia el upload tal cual a videos_dir.
    Devuelve el locator público (p. ej. '/videos/1718000000000-ab12cd34.mp4').
    """
    os.makedirs(videos_dir, exist_ok=True)
    name = _new_name(file.filename)
    abs_path = os.path.join(videos_dir, name)
    with open(abs_path, "wb") as out:
        shutil.copyfileobj(file.file, out)
    return f"{url_prefix.rstrip('/')}/{name}"