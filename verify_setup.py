"""
Setup verification script for the UdyamSakhi backend.
Checks that packages, configuration, the database and the AI key are in place.
"""
import asyncio
import os
import sys
from typing import List, Tuple

# Color codes for terminal output
GREEN = "\033[92m"
RED = "\033[91m"
YELLOW = "\033[93m"
BLUE = "\033[94m"
RESET = "\033[0m"


def print_status(message: str, status: bool):
    """Print colored status message."""
    symbol = f"{GREEN}✓{RESET}" if status else f"{RED}✗{RESET}"
    print(f"{symbol} {message}")


async def check_python_version() -> bool:
    """Check Python version is 3.11+."""
    version = sys.version_info
    if version.major == 3 and version.minor >= 11:
        print_status(f"Python version: {version.major}.{version.minor}.{version.micro}", True)
        return True
    print_status(f"Python version {version.major}.{version.minor} (requires 3.11+)", False)
    return False


async def check_dependencies() -> bool:
    """Check if required packages are installed."""
    required_packages = [
        "fastapi",
        "uvicorn",
        "sqlalchemy",
        "asyncpg",
        "aiosqlite",
        "httpx",
        "aiofiles",
        "multipart",
        "pydantic_settings",
        "alembic",
    ]

    all_installed = True
    for package in required_packages:
        try:
            __import__(package)
            print_status(f"Package '{package}' installed", True)
        except ImportError:
            print_status(f"Package '{package}' missing", False)
            all_installed = False

    return all_installed


async def check_env_file() -> bool:
    """Check if .env file exists."""
    if os.path.exists(".env"):
        print_status(".env file exists", True)
        return True
    print_status(".env file missing (settings fall back to defaults)", False)
    return False


async def check_upload_dir() -> bool:
    """Check if upload directory exists."""
    from app.config import settings

    if os.path.exists(settings.UPLOAD_DIR):
        print_status(f"Upload directory exists ({settings.UPLOAD_DIR})", True)
        return True
    print_status("Upload directory missing (will be created on startup)", False)
    return False


async def check_database() -> bool:
    """Check that DATABASE_URL accepts connections."""
    from sqlalchemy import text
    from sqlalchemy.ext.asyncio import create_async_engine

    from app.config import settings

    engine = create_async_engine(settings.DATABASE_URL)
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        print_status("Database connection successful", True)
        return True
    except Exception as e:
        print_status(f"Database connection failed: {str(e)}", False)
        print(f"  {YELLOW}Check DATABASE_URL in .env{RESET}")
        return False
    finally:
        await engine.dispose()


async def check_ai() -> bool:
    """Check that AI_API_KEY is set and the configured model is visible to it."""
    import httpx

    from app.config import settings

    if not settings.AI_API_KEY:
        print_status("AI_API_KEY is not set", False)
        print(f"  {YELLOW}Plan generation, reports and the legal assistant need it{RESET}")
        return False

    try:
        async with httpx.AsyncClient(timeout=10.0) as client:
            response = await client.get(
                f"{settings.AI_BASE_URL}/models/{settings.AI_MODEL}",
                headers={"x-goog-api-key": settings.AI_API_KEY},
            )
        ok = response.status_code == 200
        print_status(
            f"AI model '{settings.AI_MODEL}': {'available' if ok else f'HTTP {response.status_code}'}",
            ok,
        )
        return ok
    except Exception as e:
        print_status(f"AI endpoint unreachable: {str(e)}", False)
        return False


async def main():
    """Run all verification checks."""
    print(f"\n{BLUE}{'='*60}{RESET}")
    print(f"{BLUE}UdyamSakhi Backend - Setup Verification{RESET}")
    print(f"{BLUE}{'='*60}{RESET}\n")

    checks: List[Tuple[str, callable]] = [
        ("Python Version", check_python_version),
        ("Dependencies", check_dependencies),
        ("Environment File", check_env_file),
        ("Upload Directory", check_upload_dir),
        ("Database", check_database),
        ("Generative AI", check_ai),
    ]

    results = []

    for check_name, check_func in checks:
        print(f"\n{BLUE}Checking {check_name}...{RESET}")
        try:
            result = await check_func()
            results.append(result)
        except Exception as e:
            print_status(f"Error during check: {str(e)}", False)
            results.append(False)

    # Summary
    print(f"\n{BLUE}{'='*60}{RESET}")
    passed = sum(results)
    total = len(results)

    if passed == total:
        print(f"{GREEN}✓ All checks passed! ({passed}/{total}){RESET}")
        print(f"\n{GREEN}You're ready to run the backend:{RESET}")
        print("  uvicorn app.main:app --reload")
    else:
        print(f"{RED}✗ Some checks failed ({passed}/{total} passed){RESET}")
        print(f"\n{YELLOW}Please fix the issues above before running the backend.{RESET}")
        sys.exit(1)

    print(f"{BLUE}{'='*60}{RESET}\n")


if __name__ == "__main__":
    asyncio.run(main())
