"""
Deployment entry point for the documentation search API.
Binds to the port given in the PORT environment variable.
"""
import os

from docsearch.server.main import app

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", 8000)))
