# fakeso/__main__.py
import uvicorn

from fakeso.config import settings

if __name__ == "__main__":
    uvicorn.run("fakeso.main:app", host=settings.host, port=settings.port)
