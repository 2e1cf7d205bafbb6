import argparse
import asyncio
import logging
import sys

from colorama import Fore, init
from dotenv import load_dotenv

from quiz_readme.agents.orchestrator import generate
from quiz_readme.config.controller import load_settings

init(autoreset=True)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Regenerate README.md from the featured questions")
    parser.add_argument("--questions-dir", default=None, help="Directory of question folders")
    parser.add_argument("--readme", dest="readme_path", default=None, help="README file to update")
    parser.add_argument("--locale", default=None, help="Locale of the content files to read")
    return parser.parse_args(argv)


async def run(settings):
    return await generate(
        questions_dir=settings["questions_dir"],
        readme_path=settings["readme_path"],
        locale=settings["locale"],
    )


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO)
    load_dotenv()

    args = parse_args(argv)
    settings = load_settings(vars(args))

    try:
        summary = asyncio.run(run(settings))
    except KeyboardInterrupt:
        print(Fore.YELLOW + "✗ Interrupted")
        return 130
    except Exception as e:
        logging.error(f"README generation failed: {e}", exc_info=True)
        print(Fore.RED + f"✗ README generation failed: {type(e).__name__}: {e}")
        return 1

    print(Fore.GREEN + f"✓ {summary['questions']} questions written to {settings['readme_path']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
