# SPDX-FileCopyrightText: 2025 shamir-audit contributors
# SPDX-License-Identifier: MIT

"""Offline audit trail of reconstructions with Ed25519 signatures and hash chaining.

Each reconstruction becomes one JSON file. The payload records which shares
were flagged and a digest of the secret, never the secret itself. Entries are
chained: every payload carries the chain hash of the previous entry, starting
from ``GENESIS``.
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
import time
import uuid
from pathlib import Path
from typing import Any, Dict, Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from .numerals import to_decimal
from .shares import ReconstructionResult

_logger = logging.getLogger(__name__)

GENESIS = "GENESIS"


def secret_digest(secret: int) -> str:
    return hashlib.sha3_256(to_decimal(secret).encode("ascii")).hexdigest()


def _canonical(payload: Dict[str, Any]) -> bytes:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True).encode("utf-8")


class AuditTrail:
    """Signed, hash-chained log stored in ``directory``."""

    def __init__(self, directory: os.PathLike[str] | str) -> None:
        self.directory = Path(directory).expanduser()
        self.directory.mkdir(parents=True, exist_ok=True)
        self.key_path = self.directory / "signing_key.pem"
        self.chain_state_path = self.directory / "chain.state"

    def _load_private_key(self) -> Ed25519PrivateKey:
        if self.key_path.exists():
            key = serialization.load_pem_private_key(self.key_path.read_bytes(), password=None)
            if not isinstance(key, Ed25519PrivateKey):
                raise TypeError(f"{self.key_path} does not hold an Ed25519 key")
            return key
        private_key = Ed25519PrivateKey.generate()
        self.key_path.write_bytes(
            private_key.private_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PrivateFormat.PKCS8,
                encryption_algorithm=serialization.NoEncryption(),
            )
        )
        return private_key

    def _load_prev_hash(self) -> str:
        try:
            return self.chain_state_path.read_text().strip()
        except FileNotFoundError:
            return GENESIS

    def record_event(self, event: str, *, details: Optional[Dict[str, Any]] = None) -> Path:
        timestamp = int(time.time())
        payload = {
            "event": event,
            "details": details or {},
            "timestamp": timestamp,
            "prev_hash": self._load_prev_hash(),
        }
        message = _canonical(payload)
        signature = self._load_private_key().sign(message)
        chain_hash = hashlib.sha3_512(message + signature).hexdigest()
        entry = {
            "payload": payload,
            "signature": signature.hex(),
            "chain_hash": chain_hash,
        }
        file_path = self.directory / f"audit_{timestamp}_{uuid.uuid4().hex}.json"
        file_path.write_text(json.dumps(entry, ensure_ascii=False, indent=2))
        self.chain_state_path.write_text(chain_hash)
        _logger.info("Recorded audit event %s in %s", event, file_path.name)
        return file_path

    def record_reconstruction(
        self,
        result: ReconstructionResult,
        *,
        k: int,
        source: Optional[str] = None,
    ) -> Path:
        details: Dict[str, Any] = {
            "threshold": k,
            "secret_sha3_256": secret_digest(result.secret),
            "bad_shares": [to_decimal(share.x) for share in result.bad_shares],
        }
        if source is not None:
            details["source"] = source
        return self.record_event("reconstruction", details=details)

    def verify(self, path: os.PathLike[str] | str) -> bool:
        data = json.loads(Path(path).read_text())
        payload = _canonical(data["payload"])
        try:
            signature = bytes.fromhex(data.get("signature") or "")
        except ValueError:
            return False
        public_key = self._load_private_key().public_key()
        try:
            public_key.verify(signature, payload)
        except InvalidSignature:
            return False
        return hashlib.sha3_512(payload + signature).hexdigest() == data.get("chain_hash")


__all__ = ["AuditTrail", "GENESIS", "secret_digest"]
