def add_tasks(client, *tasks):
    r = None
    for task in tasks:
        r = client.post("/api/todos", json={"task": task})
        assert r.status_code == 200
    return r
