# python -m spendwise  -> dev server on :5555
import uvicorn

if __name__ == "__main__":
    uvicorn.run("spendwise.main:app", host="127.0.0.1", port=5555, reload=True)
