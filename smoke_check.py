"""Quick end-to-end check against a running server (python app.py)."""
import sys

import requests

BASE = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:5000"

r = requests.get(f"{BASE}/")
print(f"[{r.status_code}] GET /  -> {r.text}")

r = requests.post(f"{BASE}/gardener", json={"name": "Smoke Gardener", "email": "smoke@example.com"})
print(f"[{r.status_code}] POST /gardener -> {r.json()}")

r = requests.post(f"{BASE}/gardener", json={"name": "No Email"})
print(f"[{r.status_code}] POST /gardener (missing email) -> {r.json()}")

r = requests.post(
    f"{BASE}/tips",
    json={
        "title": "Compost 101",
        "description": "Layer greens and browns.",
        "author_email": "smoke@example.com",
        "likes": 99,
    },
)
created = r.json()
print(f"[{r.status_code}] POST /tips -> {created}")
tip_id = created.get("insertedId")

r = requests.get(f"{BASE}/tips", params={"author_email": "smoke@example.com"})
for tip in r.json():
    print(f"       {tip['_id']}  title={tip['title']}  likes={tip['likes']}  images={tip['images']}")

r = requests.put(f"{BASE}/tips/{tip_id}", json={"title": "Compost 102", "description": "Turn weekly."})
print(f"[{r.status_code}] PUT /tips/{tip_id} -> {r.json()}")

r = requests.put(f"{BASE}/tips/not-a-valid-id", json={"title": "x"})
print(f"[{r.status_code}] PUT /tips/not-a-valid-id -> {r.json()}")

for attempt in (1, 2):
    r = requests.delete(f"{BASE}/tips/{tip_id}")
    print(f"[{r.status_code}] DELETE /tips/{tip_id} (#{attempt}) -> {r.json()}")
