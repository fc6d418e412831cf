"""
Tests d'intégration API pour la gestion des comptes (administrateurs uniquement).
"""

from app.models.enums import UserRole

from conftest import PASSWORD, login, make_user


def test_liste_sans_hash(admin_client):
    data = admin_client.get("/api/users").json()

    assert [u["username"] for u in data] == ["directrice"]
    assert "passwordHash" not in data[0]
    assert "password" not in data[0]


def test_create_user_tout_role(admin_client):
    response = admin_client.post("/api/users", json={
        "username": "prof.alaoui", "password": "motdepasse", "role": "teacher", "fullName": "Nadia Alaoui",
    })

    assert response.status_code == 201
    assert response.json()["role"] == "teacher"
    # pas de fiche enseignant créée automatiquement
    assert admin_client.get("/api/teachers").json() == []


def test_create_user_doublon(admin_client):
    response = admin_client.post("/api/users", json={
        "username": "directrice", "password": "x", "fullName": "Autre",
    })
    assert response.status_code == 400
    assert response.json()["message"] == "Ce nom d'utilisateur existe déjà."


def test_get_user_introuvable(admin_client):
    assert admin_client.get("/api/users/99").status_code == 404


def test_update_mot_de_passe_hache(admin_client, storage):
    user = make_user(storage, "etudiant", UserRole.STUDENT)

    response = admin_client.put(f"/api/users/{user.id}", json={"password": "nouveau-mdp"})

    assert response.status_code == 200
    stored = storage.users.get(user.id)
    assert stored.password_hash != "nouveau-mdp"
    assert stored.password_hash != user.password_hash
    login(admin_client, "etudiant", "nouveau-mdp")


def test_update_renommage_vers_nom_existant(admin_client, storage):
    user = make_user(storage, "etudiant", UserRole.STUDENT)
    response = admin_client.put(f"/api/users/{user.id}", json={"username": "directrice"})
    assert response.status_code == 400


def test_update_garde_son_propre_nom(admin_client, storage):
    user = make_user(storage, "etudiant", UserRole.STUDENT)
    response = admin_client.put(f"/api/users/{user.id}", json={"username": "etudiant", "fullName": "Renommé"})
    assert response.status_code == 200
    assert response.json()["fullName"] == "Renommé"


def test_update_user_introuvable(admin_client):
    assert admin_client.put("/api/users/99", json={"fullName": "X"}).status_code == 404


def test_delete_user(admin_client, storage):
    user = make_user(storage, "etudiant", UserRole.STUDENT)

    assert admin_client.delete(f"/api/users/{user.id}").status_code == 204
    assert admin_client.delete(f"/api/users/{user.id}").status_code == 404
    response = admin_client.post("/api/login", json={"username": "etudiant", "password": PASSWORD})
    assert response.status_code == 401
