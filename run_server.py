import logging
import sys
from pathlib import Path
p = Path(__file__).resolve().parent
sys.path.insert(0, str(p))

from slot_allocator.config import settings
from slot_allocator.server import app
import uvicorn

if __name__ == '__main__':
    logging.basicConfig(level=settings.LOG_LEVEL)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
