import argparse
import getpass
import importlib.metadata
import json
import sys

from termcolor import colored

from newsdesk.client import Client, FileCredentialStore
from newsdesk.config import Config
from newsdesk.exceptions import ApiConnectionException, ApiServerException, ResponseDecodeException
from newsdesk.filters import NewsFilters
from newsdesk.logging import configure_logging
from newsdesk.parsers import format_article_for_display, parse_news_list_data, parse_upload_response, parse_upload_status


def version_command():
    try:
        version = importlib.metadata.version("newsdesk")
        print(f"Newsdesk version: {version}")
    except importlib.metadata.PackageNotFoundError:
        print("Newsdesk package not found. Are you in development mode?")


def login_command(client: Client, args) -> int:
    password = args.password or getpass.getpass("Password: ")
    payload = client.session.login(args.email, password)
    user = payload.get("user") or {}
    print(colored(f"Logged in as {user.get('email', args.email)}", "green"))
    return 0


def logout_command(client: Client, args) -> int:
    client.session.logout()
    print("Logged out")
    return 0


def whoami_command(client: Client, args) -> int:
    if not client.session.check_auth():
        print(colored("Not logged in", "yellow"))
        return 1
    print(json.dumps(client.session.user, indent=2))
    return 0


def news_command(client: Client, args) -> int:
    filters = NewsFilters(
        search=args.search or "",
        tag=args.tag or "",
        topic=args.topic or "",
        read_status=args.read_status or "",
        per_page=args.per_page,
        page=args.page,
    )
    page = parse_news_list_data(client.api.news.get_news(filters.to_params()))
    for article in page.news_articles:
        display = format_article_for_display(article)
        marker = colored("*", "yellow") if article.is_important else " "
        print(f"{marker} [{article.id}] {article.headline}  ({display['formatted_date']})")
    pagination = page.pagination
    print(f"page {pagination.current_page}/{pagination.total_pages}, {page.total_articles} articles")
    return 0


def upload_command(client: Client, args) -> int:
    result = parse_upload_response(client.api.upload.upload_pdf(args.path))
    if result.duplicate:
        print(colored(f"Already uploaded: {result.message}", "yellow"))
    else:
        print(colored(result.message or f"Uploaded, task {result.task_id}", "green"))
    return 0


def status_command(client: Client, args) -> int:
    for upload in parse_upload_status(client.api.upload.get_processing_status()):
        print(f"{upload.file_name}: {upload.task_status} {upload.processed_pages}/{upload.total_pages} pages")
    return 0


COMMANDS = {
    "login": login_command,
    "logout": logout_command,
    "whoami": whoami_command,
    "news": news_command,
    "upload": upload_command,
    "status": status_command,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Newsdesk CLI")
    parser.add_argument("--endpoint", help="Backend base URL (default: $NEWSDESK_API_URL)")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("version", help="Show Newsdesk version")

    login_parser = subparsers.add_parser("login", help="Log in and store the token pair")
    login_parser.add_argument("email")
    login_parser.add_argument("--password", help="Prompted for when omitted")

    subparsers.add_parser("logout", help="Revoke and forget the stored tokens")
    subparsers.add_parser("whoami", help="Show the logged-in user")

    news_parser = subparsers.add_parser("news", help="List articles")
    news_parser.add_argument("--search")
    news_parser.add_argument("--tag")
    news_parser.add_argument("--topic")
    news_parser.add_argument("--read-status", choices=["read", "unread"])
    news_parser.add_argument("--per-page", type=int, default=6)
    news_parser.add_argument("--page", type=int)

    upload_parser = subparsers.add_parser("upload", help="Upload a newspaper PDF")
    upload_parser.add_argument("path")

    subparsers.add_parser("status", help="Show PDF processing status")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "version":
        version_command()
        return 0
    if args.command not in COMMANDS:
        parser.print_help()
        return 2

    config = Config()
    if args.endpoint:
        config.configure(endpoint=args.endpoint)
    configure_logging(config)
    client = Client(store=FileCredentialStore(config.credentials_file), config=config)

    try:
        return COMMANDS[args.command](client, args)
    except (ApiServerException, ApiConnectionException, ResponseDecodeException, OSError, ValueError) as e:
        print(colored(f"Error: {e}", "red"), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
