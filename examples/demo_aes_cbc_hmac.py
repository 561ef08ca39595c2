"""
aes_cbc_hmac — Live Demo: all three AES_CBC_HMAC_SHA2 variants
===============================================================
Run:  python examples/demo_aes_cbc_hmac.py

Encrypts and decrypts a message with each variant, prints sizes and
timing, then shows a tampered ciphertext being rejected.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from aes_cbc_hmac import (ALGORITHMS, AesCbcHmacSha2, ContentEncryptionError,
                          ContentEncryptionParts, generate_key)

logging.basicConfig(level=logging.INFO, format=' %(message)s')

LINE = "═" * 70
MSG  = b"Live long and prosper."
AAD  = b"eyJhbGciOiJkaXIiLCJlbmMiOiJBMTI4Q0JDLUhTMjU2In0"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

print(f"\n{LINE}")
print("  aes_cbc_hmac — AES_CBC_HMAC_SHA2 Demo")
print(LINE)
print(f"  Message: {MSG.decode()}")

for identifier, descriptor in ALGORITHMS.items():
    header(identifier)
    aead = AesCbcHmacSha2(descriptor)
    key  = generate_key(descriptor)
    t0   = time.perf_counter()
    parts = aead.encrypt(MSG, AAD, key)
    pt    = aead.decrypt(parts, AAD, key)
    elapsed = time.perf_counter() - t0
    ok("Combined key", f"{len(key) * 8} bits (MAC {len(key) * 4} + AES {len(key) * 4})")
    ok("IV",           parts.iv.hex())
    ok("Ciphertext",   f"{len(parts.ciphertext)} bytes")
    ok("Tag",          parts.authentication_tag.hex())
    ok("Round-trip",   f"{elapsed*1000:.2f} ms")
    ok("Decrypted",    pt.decode())

    bad = bytearray(parts.ciphertext)
    bad[0] ^= 0x01
    try:
        aead.decrypt(ContentEncryptionParts(parts.iv, bytes(bad), parts.authentication_tag), AAD, key)
        print("  ✗  Tampered ciphertext was accepted")
    except ContentEncryptionError as e:
        ok("Tamper rejected", e.kind.name)

print(f"\n{LINE}\n")
