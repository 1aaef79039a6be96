"""
Main entry point for CLI invocation
"""

from argparse import ArgumentParser, Namespace
import locale
import sys
import traceback

from wfquery.account import resolve_account
from wfquery.errors import WebFingerQueryError
from wfquery.formatting import format_jrd
from wfquery.reporting import fatal, is_trace_active, set_reporting_level, trace
from wfquery.utils import WFQUERY_VERSION
from wfquery.web import HttpxWebClient, WebClient
from wfquery.webfinger import WebFingerClient


def main(argv: list[str] | None = None, web_client: WebClient | None = None) -> None:
    """
    Main entry point for CLI invocation.
    """
    parser = create_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    set_reporting_level(args.verbose)

    try:
        locale.setlocale(locale.LC_COLLATE, '')
    except locale.Error as e:
        trace('Keeping the C locale for sorting:', e)

    try :
        run(args, web_client or HttpxWebClient())

    except WebFingerQueryError as e:
        if is_trace_active():
            traceback.print_exception( e )
        fatal( str(e) )
    except Exception as e: # pylint: disable=broad-exception-caught
        if is_trace_active():
            traceback.print_exception( e )
        fatal( type(e).__name__, "--", e )


def run(args: Namespace, web_client: WebClient) -> None:
    """
    Look up the account given in args and write the result to stdout.
    """
    account, hostname = resolve_account(args.acct, args.hostname)
    jrd = WebFingerClient(web_client).query(account, hostname, args.rel)

    if args.json:
        sys.stdout.write(jrd.as_json_string() if jrd else 'null')
    elif jrd:
        sys.stdout.write(format_jrd(jrd))
    else:
        sys.stdout.write(f'User { account } not found on { hostname }\n')


def create_parser() -> ArgumentParser:
    parser = ArgumentParser(prog='webfinger', description='Look up an account with WebFinger (RFC 7033)')
    # Optional here, so that a missing account is reported like all other errors
    parser.add_argument('acct', nargs='?',
            help='The account to look up, e.g. user@example.com or @user@example.com')
    parser.add_argument('--hostname',
            help='The host to query. Appended to the account if it does not have one')
    parser.add_argument('--json', action='store_true',
            help='Write the JRD returned by the server as JSON')
    parser.add_argument('--rel', action='append',
            help='Only ask for links with this relation type. May be repeated')
    parser.add_argument('-v', '--verbose', action='count', default=0,
            help='Display extra output. May be repeated for even more output' )
    parser.add_argument('--version', action='version', version=WFQUERY_VERSION)
    return parser


if __name__ == '__main__':
    main()
