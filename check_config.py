#!/usr/bin/env python3
"""
Configuration and API Key Validation Tool
Checks the environment the flashcard API needs before deploying it
"""
import os
import sys

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from flashgen.infrastructure.config import PLACEHOLDER_INDICATORS, Settings  # noqa: E402
from flashgen.services.extractors import EXTRACTORS  # noqa: E402


def check_env_var(name, required=True, sensitive=False):
    """Check if an environment variable is set and valid."""
    value = os.getenv(name, '')

    if not value:
        status = "❌ MISSING" if required else "⚠️  OPTIONAL (not set)"
        return False, status, ""

    # Check for placeholder values
    if any(indicator in value.lower() for indicator in PLACEHOLDER_INDICATORS):
        return False, "❌ PLACEHOLDER", value if not sensitive else "***"

    display_value = value if not sensitive else f"{value[:4]}..." if len(value) > 8 else "***"
    return True, "✅ SET", display_value


def main():
    print("=" * 70)
    print("Flashcard API Configuration Check")
    print("=" * 70)

    settings = Settings()
    all_ok = True

    # AI Services
    print("\n🤖 AI SERVICES")
    print("-" * 70)
    key_name = "OPENAI_API_KEY" if settings.FG_PROVIDER == "openai" else "GEMINI_API_KEY"
    configs = [
        ("FG_PROVIDER", False, False),
        ("GEMINI_API_KEY", key_name == "GEMINI_API_KEY", True),
        ("OPENAI_API_KEY", key_name == "OPENAI_API_KEY", True),
        ("FG_GEMINI_MODEL", False, False),
        ("FG_OPENAI_MODEL", False, False),
        ("FG_BASE_URL", False, False),
    ]

    for name, required, sensitive in configs:
        ok, status, value = check_env_var(name, required, sensitive)
        print(f"{name:30s} {status:20s} {value}")
        if required and not ok:
            all_ok = False

    if settings.FG_PROVIDER not in ("gemini", "openai"):
        print(f"\n❌ FG_PROVIDER '{settings.FG_PROVIDER}' is not supported (use 'gemini' or 'openai').")
        all_ok = False

    # Generation
    print("\n🃏 GENERATION")
    print("-" * 70)
    print(f"{'FG_MAX_CONTEXT_CHARS':30s} {settings.FG_MAX_CONTEXT_CHARS}")
    print(f"{'FG_EXTRACTOR':30s} {settings.FG_EXTRACTOR}")
    print(f"{'FG_CORS_ALLOW_AUTHORIZATION':30s} {settings.FG_CORS_ALLOW_AUTHORIZATION}")
    if settings.FG_EXTRACTOR not in EXTRACTORS:
        print(f"\n❌ FG_EXTRACTOR '{settings.FG_EXTRACTOR}' is not one of: {', '.join(sorted(EXTRACTORS))}")
        all_ok = False

    # Summary
    print("\n" + "=" * 70)
    if all_ok:
        print("✅ All required configurations are set!")
        return 0
    else:
        print("❌ Some required configurations are missing or invalid!")
        return 1

if __name__ == '__main__':
    sys.exit(main())
