import logging
import sys

from optparse import OptionParser

from tailinline import batch
from tailinline.preflight import VERSIONS


logger = logging.getLogger('tailinline')


def create_parser():
    parser = OptionParser(usage='usage: %prog -i INPUT -o OUTPUT [options]')
    parser.add_option(
        '-i', '--input',
        help='directory of HTML templates to process')
    parser.add_option(
        '-o', '--output',
        help='directory to write processed templates to')
    parser.add_option(
        '-m', '--mode', default=batch.MINIFIED,
        help='output mode, "%s" minifies the HTML and any other value writes '
             'it as is [default: %%default]' % batch.MINIFIED)
    parser.add_option(
        '-c', '--clean', action='store_true', default=False,
        help='remove the output directory before writing')
    parser.add_option(
        '-k', '--keep-unresolved', action='store_true', default=False,
        help='keep classes that could not be resolved, along with the style tags')
    parser.add_option(
        '--no-baseline', dest='baseline', action='store_false', default=True,
        help='do not inline the baseline stylesheet')
    parser.add_option(
        '--base-version', choices=VERSIONS, default=None,
        help='baseline stylesheet version, one of %s [default: latest]' % ', '.join(VERSIONS))
    parser.add_option(
        '-v', '--verbose', action='store_true', default=False,
        help='log debugging output')
    return parser


def main(argv=None):
    parser = create_parser()
    options, args = parser.parse_args(argv)
    if args:
        parser.error('unexpected arguments: %s' % ' '.join(args))
    if not options.input or not options.output:
        parser.error('both --input and --output are required')

    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        batch.process_directory(
            options.input,
            options.output,
            mode=options.mode,
            clean=options.clean,
            inject_baseline=options.baseline,
            strip_unresolved=not options.keep_unresolved,
            base_version=options.base_version,
        )
    except Exception:
        logger.exception('Failed to process templates from %s', options.input)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
