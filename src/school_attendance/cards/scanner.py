from __future__ import annotations

from typing import BinaryIO

from PIL import Image
from pyzbar.pyzbar import decode as pyzbar_decode


def decode_qr_payloads(stream: BinaryIO) -> list[str]:
    """Decode every QR/barcode in an uploaded photo into text payloads."""

    img = Image.open(stream).convert("RGB")
    payloads = []
    for symbol in pyzbar_decode(img):
        text = symbol.data.decode("utf-8", errors="ignore").strip()
        if text:
            payloads.append(text)
    return payloads
