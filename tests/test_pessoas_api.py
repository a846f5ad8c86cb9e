"""Tests for the pessoa endpoints."""

from fastapi.testclient import TestClient
from sqlalchemy import select

from cadastro.core.security import verify_password
from cadastro.db.models import Endereco, Pessoa, Telefone, TipoTelefone, Usuario
from cadastro.main import start_server


class TestCreatePessoa:
    def test_blank_name_is_rejected_and_not_persisted(self, client, scalars):
        response = client.post("/pessoa", json={"nome": "   ", "idade": 20})

        assert response.status_code == 400
        assert "Erro" in response.json()
        assert scalars(select(Pessoa)) == []

    def test_missing_name_is_rejected(self, client, scalars):
        response = client.post("/pessoa", json={"idade": 20})

        assert response.status_code == 400
        assert scalars(select(Pessoa)) == []

    def test_user_without_password_is_rejected(self, client, scalars):
        for usuario in ({"login": "ana", "senha": ""}, {"login": "ana"}):
            response = client.post("/pessoa", json={"nome": "Ana", "usuario": usuario})

            assert response.status_code == 400
            assert response.json() == {"Erro": "A senha do usuário é obrigatória."}
        assert scalars(select(Pessoa)) == []

    def test_minimal_person(self, client):
        response = client.post("/pessoa", json={"nome": "João"})

        assert response.status_code == 201
        data = response.json()
        assert data["nome"] == "João"
        assert data["tipo_pessoa"] == "fisica"
        assert data["telefones"] == []
        assert data["emails"] == []
        assert data["endereco"] is None
        assert data["usuario"] is None

    def test_nested_create_returns_full_graph(self, client, pessoa_completa):
        response = client.post("/pessoa", json=pessoa_completa)

        assert response.status_code == 201
        data = response.json()
        assert response.headers["location"] == f"/pessoa/{data['id']}"

        assert [t["numero"] for t in data["telefones"]] == ["+55 11 99999-0000", "+55 11 3333-0000"]
        assert [t["tipo_telefone"]["nome"] for t in data["telefones"]] == ["Celular", "Fixo"]
        assert all(t["pessoa_id"] == data["id"] for t in data["telefones"])
        assert "pessoa" not in data["telefones"][0]

        assert data["emails"][0]["email"] == "maria@exemplo.com"
        assert data["emails"][0]["tipo_email"] == {"id": 2, "nome": "Pessoal"}

        assert data["endereco"]["cidade"] == "São Paulo"
        assert data["endereco"]["tipo_endereco"]["nome"] == "Casa"

        usuario = data["usuario"]
        assert usuario["login"] == "maria"
        assert usuario["ativo"] is True
        assert usuario["criado_em"]
        assert usuario["ultimo_acesso"] is None
        assert usuario["perfil"]["nome"] == "User"
        assert "senha" not in usuario
        assert "senha_hash" not in usuario

    def test_stored_password_is_hashed(self, client, scalars, pessoa_completa):
        client.post("/pessoa", json=pessoa_completa)

        [usuario] = scalars(select(Usuario))
        assert usuario.senha_hash != "s3nh4-forte"
        assert verify_password("s3nh4-forte", usuario.senha_hash)

    def test_client_lookup_objects_are_ignored(self, client, scalars):
        payload = {
            "nome": "Carlos",
            "telefones": [
                {"numero": "1234", "tipo_telefone_id": 2, "tipo_telefone": {"id": 99, "nome": "Inventado"}},
            ],
        }
        response = client.post("/pessoa", json=payload)

        assert response.status_code == 201
        assert response.json()["telefones"][0]["tipo_telefone"]["nome"] == "Celular"
        assert len(scalars(select(TipoTelefone))) == 6

    def test_lookup_ids_default_to_outro(self, client):
        response = client.post(
            "/pessoa",
            json={"nome": "Bia", "telefones": [{"numero": "555"}], "emails": [{"email": "bia@x.com"}]},
        )

        data = response.json()
        assert data["telefones"][0]["tipo_telefone"]["nome"] == "Outro"
        assert data["emails"][0]["tipo_email"]["nome"] == "Outro"

    def test_password_over_72_bytes_is_rejected(self, client, scalars):
        response = client.post("/pessoa", json={"nome": "Ana", "usuario": {"login": "ana", "senha": "x" * 80}})

        assert response.status_code == 400
        assert response.json() == {"Erro": "A senha do usuário não pode passar de 72 bytes."}
        assert scalars(select(Pessoa)) == []

    def test_password_limit_counts_utf8_bytes(self, client, scalars):
        senha_72 = "x" * 72
        senha_multibyte = "ç" * 37  # 74 bytes em UTF-8

        ok = client.post("/pessoa", json={"nome": "Ana", "usuario": {"login": "ana", "senha": senha_72}})
        rejected = client.post("/pessoa", json={"nome": "Bia", "usuario": {"login": "bia", "senha": senha_multibyte}})

        assert ok.status_code == 201
        assert rejected.status_code == 400
        [usuario] = scalars(select(Usuario))
        assert verify_password(senha_72, usuario.senha_hash)

    def test_user_without_login_is_rejected(self, client, scalars):
        for usuario in ({"senha": "segredo"}, {"login": "  ", "senha": "segredo"}):
            response = client.post("/pessoa", json={"nome": "Ana", "usuario": usuario})

            assert response.status_code == 400
            assert response.json() == {"Erro": "O login do usuário é obrigatório."}
        assert scalars(select(Pessoa)) == []

    def test_user_without_login_or_password_reports_password(self, client):
        response = client.post("/pessoa", json={"nome": "Ana", "usuario": {"senha": ""}})

        assert response.status_code == 400
        assert response.json() == {"Erro": "A senha do usuário é obrigatória."}

    def test_unknown_lookup_id_fails_without_partial_rows(self, client, scalars):
        lenient = TestClient(start_server, raise_server_exceptions=False)
        payloads = [
            {"nome": "Caio", "telefones": [{"numero": "1234", "tipo_telefone_id": 999}]},
            {"nome": "Caio", "telefones": [{"numero": "1234"}], "usuario": {"login": "caio", "senha": "s", "perfil_id": 999}},
        ]

        for payload in payloads:
            response = lenient.post("/pessoa", json=payload)

            assert response.status_code == 500
            assert scalars(select(Pessoa)) == []
            assert scalars(select(Telefone)) == []
            assert scalars(select(Usuario)) == []

    def test_unknown_lookup_id_on_sub_resource(self, client, scalars):
        lenient = TestClient(start_server, raise_server_exceptions=False)
        pessoa = client.post("/pessoa", json={"nome": "Rui"}).json()

        response = lenient.post(f"/pessoa/{pessoa['id']}/telefones", json={"numero": "1", "tipo_telefone_id": 999})

        assert response.status_code == 500
        assert scalars(select(Telefone)) == []


class TestReadPessoa:
    def test_get_by_id(self, client, pessoa_completa):
        created = client.post("/pessoa", json=pessoa_completa).json()

        response = client.get(f"/pessoa/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown_id_returns_404(self, client):
        response = client.get("/pessoa/9999")

        assert response.status_code == 404
        assert response.json() == {"Erro": "Pessoa não encontrada."}

    def test_list_returns_every_person_expanded(self, client, pessoa_completa):
        nomes = ["Maria", "Pedro", "Lia"]
        for nome in nomes:
            client.post("/pessoa", json={**pessoa_completa, "nome": nome})

        response = client.get("/pessoas")

        assert response.status_code == 200
        data = response.json()
        assert [p["nome"] for p in data] == nomes
        for pessoa in data:
            assert len(pessoa["telefones"]) == 2
            assert len(pessoa["emails"]) == 1
            assert pessoa["endereco"]["logradouro"] == "Rua das Flores"
            assert pessoa["usuario"]["perfil"]["nome"] == "User"

    def test_list_empty(self, client):
        response = client.get("/pessoas")

        assert response.status_code == 200
        assert response.json() == []


class TestSubResources:
    def test_add_telefone(self, client):
        pessoa = client.post("/pessoa", json={"nome": "Rui"}).json()

        response = client.post(f"/pessoa/{pessoa['id']}/telefones", json={"numero": "9999", "tipo_telefone_id": 6})

        assert response.status_code == 201
        data = response.json()
        assert data["numero"] == "9999"
        assert data["pessoa_id"] == pessoa["id"]
        assert data["tipo_telefone"]["nome"] == "Recado"
        assert len(client.get(f"/pessoa/{pessoa['id']}").json()["telefones"]) == 1

    def test_add_email(self, client):
        pessoa = client.post("/pessoa", json={"nome": "Rui"}).json()

        response = client.post(f"/pessoa/{pessoa['id']}/emails", json={"email": "rui@x.com", "tipo_email_id": 3})

        assert response.status_code == 201
        assert response.json()["tipo_email"]["nome"] == "Profissional"

    def test_sub_resource_on_missing_person_returns_404(self, client):
        telefone = client.post("/pessoa/42/telefones", json={"numero": "1"})
        email = client.post("/pessoa/42/emails", json={"email": "a@b.com"})
        endereco = client.put("/pessoa/42/endereco", json={"cidade": "Recife"})

        for response in (telefone, email, endereco):
            assert response.status_code == 404
            assert response.json() == {"Erro": "Pessoa não encontrada."}


class TestEnderecoUpsert:
    def test_second_submission_overwrites_first(self, client, scalars):
        pessoa = client.post("/pessoa", json={"nome": "Teresa"}).json()
        url = f"/pessoa/{pessoa['id']}/endereco"

        first = client.put(url, json={"logradouro": "Rua A", "numero": "1", "cidade": "Porto", "tipo_endereco_id": 2})
        second = client.put(url, json={"logradouro": "Rua B", "numero": "2", "cidade": "Lisboa", "tipo_endereco_id": 3})

        assert first.status_code == 200
        assert second.status_code == 200
        assert second.json()["id"] == first.json()["id"]
        assert second.json()["tipo_endereco"]["nome"] == "Apartamento"

        [endereco] = scalars(select(Endereco))
        assert (endereco.logradouro, endereco.numero, endereco.cidade) == ("Rua B", "2", "Lisboa")

    def test_post_updates_address_created_with_person(self, client, scalars, pessoa_completa):
        pessoa = client.post("/pessoa", json=pessoa_completa).json()

        response = client.post(f"/pessoa/{pessoa['id']}/endereco", json={"cidade": "Campinas", "cep": "13000-000"})

        assert response.status_code == 200
        assert response.json()["cidade"] == "Campinas"
        assert response.json()["logradouro"] is None
        assert len(scalars(select(Endereco))) == 1
        assert client.get(f"/pessoa/{pessoa['id']}").json()["endereco"]["cidade"] == "Campinas"
