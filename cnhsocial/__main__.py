import uvicorn

from cnhsocial.config import DEBUG, HOST, PORT

if __name__ == "__main__":
    uvicorn.run("cnhsocial.main:app", host=HOST, port=PORT, log_level="debug" if DEBUG else "info")
