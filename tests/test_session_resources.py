import pytest
from fastapi.testclient import TestClient
from app.main import app

client = TestClient(app)
H = {"x-api-key": "test-secret"}

OUTDOOR = {
    "date": "2024-06-01", "area": "Fontainebleau", "crag": "Bas Cuvier", "sector": "Rempart",
    "climbingType": "Boulder", "trainingTypes": ["Projecting"], "energySystems": ["Power"],
    "fingerLoad": 4, "shoulderLoad": 2, "forearmLoad": 3,
    "climbs": [{"isSport": False, "name": "La Marie-Rose", "grade": "6A",
                "attemptType": "Redpoint", "attemptsNum": 3, "notes": ""}],
}
FINGERBOARD = {
    "date": "2024-06-02", "location": "Home",
    "exercises": [{"id": "ex1", "name": "Max hangs", "gripType": "Half crimp", "sets": 2,
                   "details": [{"weight": 10, "reps": 1}, {"weight": 12.5, "reps": 1}],
                   "notes": "20mm edge"}],
}
COMPETITION = {
    "date": "2024-06-03", "venue": "Block Hall", "type": "Bouldering",
    "fingerLoad": 5, "isSimulation": True,
    "rounds": [
        {"name": "Qualifiers", "position": 7,
         "climbs": [{"name": "Q1", "status": "Flash", "attemptCount": 1, "notes": ""}]},
        {"name": "Finals"},
    ],
}
GYM = {
    "date": "2024-06-04", "name": "Pull day", "bodyweight": 68.5, "trainingBlock": "Base",
    "exercises": [{"id": "a", "name": "Weighted pull-up",
                   "sets": [{"weight": 20, "reps": 5, "isWarmup": False, "isFailure": False,
                             "isDropSet": False, "completed": True}],
                   "notes": "", "linkedTo": "b"}],
}

CASES = [
    ("/outdoor_sessions", "Outdoor_Climbs", OUTDOOR, {"crag": "Apremont"}),
    ("/fingerboard_sessions", "Fingerboard_Sessions", FINGERBOARD, {"location": "Gym"}),
    ("/competition_sessions", "Competition_Sessions", COMPETITION, {"venue": "Arena"}),
    ("/gym_sessions", "Gym_Sessions", GYM, {"bodyweight": 69.0}),
]

@pytest.mark.parametrize("prefix,collection,body,change", CASES)
def test_crud_lifecycle(prefix, collection, body, change, fake_db):
    r = client.post(prefix, headers=H, json=body)
    assert r.status_code == 201, r.text
    created = r.json()
    sid = created["id"]
    assert created["createdAt"] == created["updatedAt"]
    assert sid in fake_db.collection(collection).docs

    r = client.get(prefix, headers=H)
    assert r.status_code == 200
    assert [s["id"] for s in r.json()] == [sid]

    r = client.get(f"{prefix}/{sid}", headers=H)
    assert r.status_code == 200
    assert r.json() == created

    r = client.put(f"{prefix}/{sid}", headers=H, json={**body, **change})
    assert r.status_code == 200, r.text
    updated = r.json()
    for k, v in change.items():
        assert updated[k] == v
    assert updated["createdAt"] == created["createdAt"]

    assert client.delete(f"{prefix}/{sid}", headers=H).status_code == 204
    assert client.get(f"{prefix}/{sid}", headers=H).status_code == 404

def test_competition_optional_members_omitted():
    r = client.post("/competition_sessions", headers=H, json=COMPETITION)
    rounds = r.json()["rounds"]
    assert rounds[0]["position"] == 7
    assert "position" not in rounds[1]
    assert rounds[1]["climbs"] == []
    assert "shoulderLoad" not in r.json()

def test_gym_delete_twice():
    sid = client.post("/gym_sessions", headers=H, json=GYM).json()["id"]
    assert client.delete(f"/gym_sessions/{sid}", headers=H).status_code == 204
    assert client.delete(f"/gym_sessions/{sid}", headers=H).status_code == 404

def test_collections_are_separate(fake_db):
    client.post("/gym_sessions", headers=H, json=GYM)
    assert client.get("/fingerboard_sessions", headers=H).json() == []
    assert len(client.get("/gym_sessions", headers=H).json()) == 1

@pytest.mark.parametrize("prefix", [c[0] for c in CASES])
def test_list_filters_by_date(prefix):
    body = dict(next(c[2] for c in CASES if c[0] == prefix))
    for d in ("2024-01-10", "2024-02-10", "2024-03-10"):
        client.post(prefix, headers=H, json={**body, "date": d})
    r = client.get(f"{prefix}?startDate=2024-02-01&endDate=2024-02-28", headers=H)
    assert [s["date"] for s in r.json()] == ["2024-02-10"]
