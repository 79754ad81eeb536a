"""
Command-line interface for qbittorrent-client.

Connection settings come from the environment (or a .env file), see
qbittorrent_client.config.

Usage:
    qbittorrent-client login
    qbittorrent-client list [--filter downloading] [--limit 20]
    qbittorrent-client add <file.torrent> [--category movies] [--paused]
"""

import argparse
import asyncio
import sys

from .errors import ClientError
from .factory import QBittorrentClientFactory
from .logger import configure_logging
from .models import AddTorrentOptions, FilterOptions, FilterState
from .options import ClientOptions
from .torrent_file import TorrentFile


def format_bytes(size):
    """Format bytes as human-readable string."""
    if size is None:
        return "N/A"
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024:
            return f"{size:.2f} {unit}"
        size /= 1024
    return f"{size:.2f} PB"


def build_parser():
    parser = argparse.ArgumentParser(
        description="qBittorrent WebUI client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s login
  %(prog)s list --filter downloading --limit 20
  %(prog)s add debian.torrent --category linux --paused
"""
    )
    parser.add_argument("--host", help="WebUI host and port (default: QBITTORRENT_HOST)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every request")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("login", help="Check the configured credentials")

    list_parser = subparsers.add_parser("list", help="List torrents")
    list_parser.add_argument("--filter", choices=[s.value for s in FilterState],
                             help="Filter by state")
    list_parser.add_argument("--category", help="Filter by category")
    list_parser.add_argument("--tag", help="Filter by tag")
    list_parser.add_argument("--sort", help="Sort by field")
    list_parser.add_argument("--reverse", action="store_true", default=None,
                             help="Reverse the sort order")
    list_parser.add_argument("--limit", type=int, help="Maximum number of torrents")
    list_parser.add_argument("--offset", type=int, help="Offset for pagination")
    list_parser.add_argument("--hashes", nargs="+", help="Only these info hashes")

    add_parser = subparsers.add_parser("add", help="Upload a .torrent file")
    add_parser.add_argument("path", help="Path to the .torrent file")
    add_parser.add_argument("--save-path", help="Download folder")
    add_parser.add_argument("--category", help="Category")
    add_parser.add_argument("--tags", nargs="+", help="Tags")
    add_parser.add_argument("--rename", help="Rename the torrent")
    add_parser.add_argument("--paused", action="store_true", default=None,
                            help="Add in the paused state")
    add_parser.add_argument("--skip-checking", action="store_true", default=None,
                            help="Skip hash checking")
    add_parser.add_argument("--sequential", action="store_true", default=None,
                            help="Download sequentially")
    add_parser.add_argument("--first-last", action="store_true", default=None,
                            help="Prioritize first and last pieces")
    add_parser.add_argument("--auto-tmm", action="store_true", default=None,
                            help="Use Automatic Torrent Management")
    add_parser.add_argument("--up-limit", type=int, help="Upload limit in bytes/s")
    add_parser.add_argument("--dl-limit", type=int, help="Download limit in bytes/s")
    add_parser.add_argument("--ratio-limit", type=float, help="Share ratio limit")
    add_parser.add_argument("--seeding-time-limit", type=int, help="Seeding limit in minutes")

    return parser


async def run(args, options):
    async with QBittorrentClientFactory(options).create() as client:
        status = await client.login()
        if not status.is_success:
            print(f"Login failed: {status}")
            return 1

        if args.command == "login":
            print(f"Logged in to {client.host} as {client.username}")

        elif args.command == "list":
            filters = FilterOptions(
                filter=args.filter,
                category=args.category,
                tag=args.tag,
                sort=args.sort,
                reverse=args.reverse,
                limit=args.limit,
                offset=args.offset,
                hashes=args.hashes,
            )
            response = await client.get_torrents(filters)
            torrents = response.get_result("get torrents")
            if not torrents:
                print("No torrents found.")
            else:
                print(f"{'HASH':<20} {'STATE':<12} {'PROGRESS':<10} {'SIZE':<12} {'NAME'}")
                print("-" * 90)
                for t in torrents:
                    progress = f"{t.progress * 100:.1f}%"
                    print(f"{t.hash[:20]:<20} {t.state.value[:12]:<12} {progress:<10} "
                          f"{format_bytes(t.size):<12} {t.name[:40]}")

        elif args.command == "add":
            torrent_file = TorrentFile(args.path)
            torrent = AddTorrentOptions(
                path=args.path,
                save_path=args.save_path,
                category=args.category,
                tags=args.tags,
                rename=args.rename,
                paused=args.paused,
                skip_checking=args.skip_checking,
                sequential_download=args.sequential,
                first_last_piece_priority=args.first_last,
                automatic_torrent_management=args.auto_tmm,
                up_limit=args.up_limit,
                dl_limit=args.dl_limit,
                ratio_limit=args.ratio_limit,
                seeding_time_limit=args.seeding_time_limit,
            )
            response = await client.add_torrent(torrent)
            response.get_result("add torrent")
            print(f"Added {torrent_file.name} ({format_bytes(torrent_file.size())})")
            print(f"Hash: {torrent_file.info_hash()}")

    return 0


def main():
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    configure_logging(verbose=args.verbose)

    options = ClientOptions.from_config()
    if args.host:
        options = options.model_copy(update={"host": args.host})

    try:
        code = asyncio.run(run(args, options))
    except ClientError as e:
        print(f"Error: {e}")
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
