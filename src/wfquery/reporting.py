"""
Reporting functionality
"""

import logging
import logging.config
import sys
import traceback

logging.config.dictConfig({
    'version'                  : 1,
    'disable_existing_loggers' : False,
    'formatters'               : {
        'standard' : {
            'format' : '[%(levelname)s] %(name)s: %(message)s'
        },
    },
    'handlers' : {
        'default' : {
            'level'     : 'DEBUG',
            'formatter' : 'standard',
            'class'     : 'logging.StreamHandler',
            'stream'    : 'ext://sys.stderr'
        }
    },
    'loggers' : {
        '' : { # root logger -- set level to most output that can happen
            'handlers'  : [ 'default' ],
            'level'     : 'WARNING',
            'propagate' : True
        }
    }
})
LOG = logging.getLogger( 'wfquery' )

def set_reporting_level(n_verbose_flags: int) :
    if n_verbose_flags == 1:
        LOG.setLevel(logging.INFO)
    elif n_verbose_flags >= 2:
        LOG.setLevel(logging.DEBUG)
    else:
        LOG.setLevel(logging.NOTSET)


def trace(*args):
    """
    Emit a trace message.

    args: the message or message components
    """
    if LOG.isEnabledFor(logging.DEBUG):
        LOG.debug(_construct_msg(True, False, args))


def is_trace_active() :
    """
    Is trace logging on?

    return: True or False
    """
    return LOG.isEnabledFor(logging.DEBUG)


def info(*args):
    """
    Emit an info message.

    args: msg: the message or message components
    """
    if LOG.isEnabledFor(logging.INFO):
        LOG.info(_construct_msg(False, False, args))


def fatal(*args):
    """
    Emit a fatal error message and exit with code 1.

    args: the message or message components
    """
    if args:
        if LOG.isEnabledFor(logging.CRITICAL):
            LOG.critical(_construct_msg(False, LOG.isEnabledFor(logging.DEBUG), args))

    raise SystemExit(1) # Don't call exit() because that will close stdin


def _construct_msg(with_loc: bool, with_tb: bool, args: tuple) -> str:
    """
    Join the message components into one line.

    with_loc: prefix the message with the caller's file, line and function
    with_tb: append the traceback if the last component is an Exception
    """
    parts = []
    if with_loc:
        frame = sys._getframe(2) # pylint: disable=protected-access
        parts.append(f'{ frame.f_code.co_filename }#{ frame.f_lineno } { frame.f_code.co_name }:')

    for arg in args:
        if arg is None:
            parts.append('<undef>')
        elif isinstance(arg, OSError):
            parts.append(f'{ type(arg).__name__ } { arg }')
        else:
            parts.append(str(arg))
    ret = ' '.join(parts)

    if with_tb and args and isinstance(args[-1], Exception):
        last = args[-1]
        ret += '\n' + ''.join(traceback.format_exception(type(last), last, last.__traceback__))

    return ret
