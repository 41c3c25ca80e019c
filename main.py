"""
Answer Gateway
Forwards chat completion requests to OpenAI and relays the response.
"""
from answer_gateway.app import create_app
from answer_gateway.config.settings import get_settings

HOST = "0.0.0.0"
PORT = 8080

app = create_app(get_settings())

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)
