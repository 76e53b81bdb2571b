# report.py
"""
Отчёт о прогоне: вход, стартовое значение и статистика.

Отчёт можно:
- подписать ed25519 (адрес подписанта = sha256(public_key)[:40]),
- сохранить в JSON.
"""

import hashlib
import json
import logging
from typing import Tuple

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey
from cryptography.hazmat.primitives.serialization import Encoding, NoEncryption, PrivateFormat, PublicFormat

from sequence_stats import StatisticsRecord

logger = logging.getLogger("collatz.report")


def build_report(text: str, start: int, record: StatisticsRecord) -> dict:
    return {
        "input": text.strip(),
        "start": str(start),
        **record.to_dict(),
    }


def report_hash(report: dict) -> str:
    """sha256 канонического JSON отчёта без подписи."""
    payload = {k: v for k, v in report.items() if k != "signature"}
    return hashlib.sha256(json.dumps(payload, sort_keys=True).encode()).hexdigest()


def generate_keypair() -> Tuple[str, str]:
    """
    Возвращает (private_hex, public_hex).
    """
    priv = Ed25519PrivateKey.generate()
    priv_hex = priv.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption()).hex()
    return priv_hex, _public_hex(priv)


def _public_hex(priv: Ed25519PrivateKey) -> str:
    return priv.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw).hex()


def signer_address(public_hex: str) -> str:
    return hashlib.sha256(bytes.fromhex(public_hex)).hexdigest()[:40]


def sign_report(report: dict, private_hex: str) -> dict:
    priv = Ed25519PrivateKey.from_private_bytes(bytes.fromhex(private_hex))
    pub_hex = _public_hex(priv)
    sig = priv.sign(report_hash(report).encode())
    signed = dict(report)
    signed["signature"] = {"signer": signer_address(pub_hex), "sig": sig.hex(), "pub": pub_hex}
    return signed


def verify_report(report: dict) -> bool:
    entry = report.get("signature") or {}
    signer = entry.get("signer")
    sig = entry.get("sig")
    pub_hex = entry.get("pub")
    if not signer or not sig or not pub_hex:
        return False
    try:
        if signer != signer_address(pub_hex):
            return False
        pub = Ed25519PublicKey.from_public_bytes(bytes.fromhex(pub_hex))
        pub.verify(bytes.fromhex(sig), report_hash(report).encode())
    except (InvalidSignature, ValueError):
        return False
    return True


def save_report(report: dict, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(report, f, ensure_ascii=False, indent=2)
    logger.info("report saved to %s", path)

