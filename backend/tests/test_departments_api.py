from uuid import uuid4

API = "/api/v1"


def _create(client, name, **fields):
    response = client.post(f"{API}/departments/", json={"name": name, **fields})
    assert response.status_code == 201, response.text
    return response.json()


def _create_employee(client, first_name, last_name, **fields):
    payload = {
        "first_name": first_name,
        "last_name": last_name,
        "email": f"{first_name}.{last_name}@example.com".lower(),
        "hire_date": "2024-01-15",
        "position": "Engineer",
        **fields,
    }
    response = client.post(f"{API}/employees/", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_and_fetch_department(client):
    created = _create(client, "Engineering", description="Builds things")

    response = client.get(f"{API}/departments/{created['id']}")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Engineering"
    assert data["description"] == "Builds things"
    assert data["parent_id"] is None
    assert data["member_count"] == 0
    assert "created_at" in data and "updated_at" in data


def test_create_validation_errors(client):
    assert client.post(f"{API}/departments/", json={"name": "  "}).status_code == 400
    response = client.post(
        f"{API}/departments/", json={"name": "Child", "parent_id": str(uuid4())}
    )
    assert response.status_code == 404
    response = client.post(
        f"{API}/departments/", json={"name": "Child", "head_id": str(uuid4())}
    )
    assert response.status_code == 400


def test_get_missing_department(client):
    response = client.get(f"{API}/departments/{uuid4()}")

    assert response.status_code == 404
    assert response.json()["detail"] == "Department not found"


def test_list_departments_sorted_with_counts(client):
    _create(client, "Sales")
    ops = _create(client, "Operations")
    _create_employee(client, "Ann", "Archer", department_id=ops["id"])

    response = client.get(f"{API}/departments/")

    assert response.status_code == 200
    data = response.json()
    assert [d["name"] for d in data] == ["Operations", "Sales"]
    assert [d["member_count"] for d in data] == [1, 0]


def test_tree_endpoint(client):
    root = _create(client, "Root")
    _create(client, "ChildB", parent_id=root["id"])
    child_a = _create(client, "ChildA", parent_id=root["id"])
    employee = _create_employee(client, "Eve", "Example", department_id=child_a["id"])

    response = client.get(f"{API}/departments/tree")

    assert response.status_code == 200
    (root_node,) = response.json()
    assert root_node["name"] == "Root"
    assert root_node["depth"] == 0
    assert [c["name"] for c in root_node["children"]] == ["ChildA", "ChildB"]
    a_node = root_node["children"][0]
    assert a_node["member_count"] == 1
    assert a_node["depth"] == 1
    assert a_node["path_names"] == ["Root", "ChildA"]
    assert a_node["path"] == [root["id"], child_a["id"]]
    assert a_node["employees"] == [
        {
            "id": employee["id"],
            "employee_id": employee["employee_id"],
            "first_name": "Eve",
            "last_name": "Example",
            "position": "Engineer",
        }
    ]


def test_update_rejects_cycles(client):
    a = _create(client, "A")
    b = _create(client, "B", parent_id=a["id"])
    c = _create(client, "C", parent_id=b["id"])

    response = client.put(f"{API}/departments/{a['id']}", json={"parent_id": a["id"]})
    assert response.status_code == 400

    response = client.put(f"{API}/departments/{a['id']}", json={"parent_id": c["id"]})
    assert response.status_code == 400

    response = client.put(f"{API}/departments/{c['id']}", json={"parent_id": None})
    assert response.status_code == 200
    assert response.json()["parent_id"] is None


def test_update_missing_department(client):
    response = client.put(f"{API}/departments/{uuid4()}", json={"name": "Ghost"})

    assert response.status_code == 404


def test_delete_flow(client):
    parent = _create(client, "Parent")
    child = _create(client, "Child", parent_id=parent["id"])
    other = _create(client, "Other")
    employee = _create_employee(client, "Eve", "Example", department_id=child["id"])

    assert client.delete(f"{API}/departments/{parent['id']}").status_code == 409
    assert client.delete(f"{API}/departments/{child['id']}").status_code == 409

    response = client.put(
        f"{API}/employees/{employee['id']}", json={"department_id": other["id"]}
    )
    assert response.status_code == 200

    assert client.delete(f"{API}/departments/{child['id']}").status_code == 204
    assert client.delete(f"{API}/departments/{parent['id']}").status_code == 204
    assert client.get(f"{API}/departments/{child['id']}").status_code == 404


def test_default_department_cannot_be_deleted(client):
    employee = _create_employee(client, "Ann", "Archer")

    response = client.delete(f"{API}/departments/{employee['department_id']}")

    assert response.status_code == 400


def test_assign_and_remove_employees(client):
    team = _create(client, "Team")
    ann = _create_employee(client, "Ann", "Archer")
    bob = _create_employee(client, "Bob", "Baker")

    response = client.post(
        f"{API}/departments/{team['id']}/employees",
        json={"employee_ids": [ann["id"], bob["id"], ann["id"]]},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["department"]["id"] == team["id"]
    assert data["department"]["member_count"] == 2
    assert {e["id"] for e in data["employees"]} == {ann["id"], bob["id"]}
    assert all(e["department"] == "Team" for e in data["employees"])

    response = client.delete(f"{API}/departments/{team['id']}/employees/{ann['id']}")
    assert response.status_code == 200
    assert response.json()["department"] == "Unassigned"

    response = client.delete(f"{API}/departments/{team['id']}/employees/{ann['id']}")
    assert response.status_code == 404


def test_assign_errors(client):
    team = _create(client, "Team")

    response = client.post(
        f"{API}/departments/{team['id']}/employees", json={"employee_ids": []}
    )
    assert response.status_code == 400

    response = client.post(
        f"{API}/departments/{team['id']}/employees",
        json={"employee_ids": [str(uuid4())]},
    )
    assert response.status_code == 404

    response = client.post(
        f"{API}/departments/{uuid4()}/employees", json={"employee_ids": [str(uuid4())]}
    )
    assert response.status_code == 404
