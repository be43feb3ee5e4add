import uvicorn

from msgql import create_app
from msgql.config import load_settings

settings = load_settings()

app = create_app(settings)

if __name__ == '__main__':
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)
