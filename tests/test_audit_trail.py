import json

from shamir_audit import ReconstructionResult, Share
from shamir_audit.audit import GENESIS, AuditTrail, secret_digest


def test_record_event_creates_signed_chain(tmp_path):
    trail = AuditTrail(tmp_path)

    first_path = trail.record_event("first", details={"value": 1})
    second_path = trail.record_event("second", details={"value": 2})

    assert first_path.exists()
    assert second_path.exists()
    assert first_path != second_path

    for path in (first_path, second_path):
        assert trail.verify(path)

    first_data = json.loads(first_path.read_text())
    second_data = json.loads(second_path.read_text())
    assert first_data["payload"]["prev_hash"] == GENESIS
    assert second_data["payload"]["prev_hash"] == first_data["chain_hash"]
    assert (tmp_path / "chain.state").read_text().strip() == second_data["chain_hash"]


def test_record_reconstruction_hides_secret(tmp_path):
    trail = AuditTrail(tmp_path)
    secret = 31415926535897932384626433
    result = ReconstructionResult(secret=secret, bad_shares=(Share(3, 99),))

    path = trail.record_reconstruction(result, k=2, source="shares.json")

    text = path.read_text()
    assert str(secret) not in text
    details = json.loads(text)["payload"]["details"]
    assert details == {
        "threshold": 2,
        "secret_sha3_256": secret_digest(secret),
        "bad_shares": ["3"],
        "source": "shares.json",
    }


def test_tampered_entry_fails_verification(tmp_path):
    trail = AuditTrail(tmp_path)
    path = trail.record_reconstruction(ReconstructionResult(secret=5), k=2)

    data = json.loads(path.read_text())
    data["payload"]["details"]["bad_shares"] = ["1"]
    path.write_text(json.dumps(data))

    assert not trail.verify(path)


def test_signing_key_is_reused(tmp_path):
    path = AuditTrail(tmp_path).record_event("first")
    assert (tmp_path / "signing_key.pem").exists()
    assert AuditTrail(tmp_path).verify(path)


def test_directory_is_created(tmp_path):
    target = tmp_path / "nested" / "audit"
    trail = AuditTrail(target)
    assert target.is_dir()
    assert trail.record_event("test").parent == target


def test_malformed_signature_fails_verification(tmp_path):
    trail = AuditTrail(tmp_path)
    path = trail.record_event("first")

    data = json.loads(path.read_text())
    data["signature"] = "not hex"
    path.write_text(json.dumps(data))

    assert not trail.verify(path)


def test_digest_of_huge_secret(tmp_path):
    import hashlib

    secret = 10**5000
    expected = hashlib.sha3_256(("1" + "0" * 5000).encode("ascii")).hexdigest()
    assert secret_digest(secret) == expected

    path = AuditTrail(tmp_path).record_reconstruction(ReconstructionResult(secret=secret), k=1)
    assert json.loads(path.read_text())["payload"]["details"]["secret_sha3_256"] == expected
