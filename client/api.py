import os, requests
from dotenv import load_dotenv
load_dotenv()
API = os.getenv("API_BASE_URL", "http://localhost:5000")
S = requests.Session()

def healthz():  r=S.get(f"{API}/healthz",timeout=10); r.raise_for_status(); return r.json()
def cards():    r=S.get(f"{API}/api/cards",timeout=30); r.raise_for_status(); return r.json()["cards"]
def save(cs):   r=S.post(f"{API}/api/cards",json={"cards":cs},timeout=30); r.raise_for_status(); return r.json()
def delete(i):  r=S.delete(f"{API}/api/cards/{i}",timeout=30); r.raise_for_status(); return r.json()

def scan(filename: str, data: bytes, content_type: str):
    # the model call can take a while on multi-card photos
    files = {"image": (filename, data, content_type)}
    r = S.post(f"{API}/api/scan-cards", files=files, timeout=120)
    r.raise_for_status()
    return r.json()

def update(card_id, fields: dict):
    r = S.put(f"{API}/api/cards/{card_id}", json=fields, timeout=30)
    r.raise_for_status()
    return r.json()["card"]
