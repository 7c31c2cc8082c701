# main_crypto_link_demo.py
"""
Command-line demo: prints the Happ crypto link for a subscription URL.

    python main_crypto_link_demo.py https://subscription.link.com/s/remnawavetop
    python main_crypto_link_demo.py https://example.com/sub --version v3 --parts
"""
import argparse
import sys
from typing import List, Optional

from happ_crypto.crypto_configs import CRYPTO_CONFIGS, DEFAULT_VERSION, SUPPORTED_VERSIONS, max_plaintext_bytes
from happ_crypto.link_encryptor import encrypt_to_composed_link, encrypt_to_parts


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build a Happ crypto deep link (happ://cryptN/...).")
    parser.add_argument("content", help="Text to encrypt, usually a subscription URL.")
    parser.add_argument("--version", choices=SUPPORTED_VERSIONS, default=DEFAULT_VERSION,
                        help=f"Crypto link version (default: {DEFAULT_VERSION}).")
    parser.add_argument("--parts", action="store_true",
                        help="Print the deep link prefix and base64 ciphertext separately.")
    return parser


def run_demo(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    content_len = len(args.content.encode("utf-8"))
    capacity = max_plaintext_bytes(CRYPTO_CONFIGS[args.version])

    if args.parts:
        result = encrypt_to_parts(args.content, args.version)
        if result is None:
            print(f"FAILURE: Could not encrypt {content_len} bytes with {args.version} "
                  f"(key accepts at most {capacity} bytes).", file=sys.stderr)
            return 1
        print(f"Deep link prefix:  {result.deep_link}")
        print(f"Encrypted content: {result.encrypted_content}")
        return 0

    link = encrypt_to_composed_link(args.content, args.version)
    if link is None:
        print(f"FAILURE: Could not encrypt {content_len} bytes with {args.version} "
              f"(key accepts at most {capacity} bytes).", file=sys.stderr)
        return 1
    print(link)
    return 0


if __name__ == "__main__":
    sys.exit(run_demo())
