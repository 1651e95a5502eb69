"""
Directory level processing: finds templates, inlines them and writes the
results, optionally minified.
"""

import io
import logging
import os
import shutil

import minify_html

from tailinline import from_string, split_doctype


logger = logging.getLogger(__name__)

MINIFIED = 'minified'
TEMPLATE_EXTENSION = '.html'


def list_templates(directory):
    """
    Returns the names of the HTML templates in ``directory``, in directory
    listing order.
    """
    return [name for name in os.listdir(directory) if name.endswith(TEMPLATE_EXTENSION)]


def prepare_output(directory, clean=False):
    """
    Creates ``directory`` (and any missing parents), removing it first when
    ``clean`` is set.
    """
    if clean and os.path.exists(directory):
        logger.info('Removing %s', directory)
        shutil.rmtree(directory)
    os.makedirs(directory, exist_ok=True)


def minify(text):
    """
    Minifies an HTML document, keeping its doctype exactly as written.
    """
    doctype, markup = split_doctype(text)
    markup = minify_html.minify(markup, minify_css=True, minify_doctype=False)
    if doctype is None:
        return markup
    return doctype + markup


def render(text, mode=MINIFIED):
    """
    Prepares inlined HTML for output: minified (leaving the doctype as is)
    when ``mode`` is ``minified``, unchanged otherwise.
    """
    if mode == MINIFIED:
        return minify(text)
    return text


def read_template(path):
    with io.open(path, 'r', encoding='utf-8-sig') as f:
        return f.read()


def write_template(text, path):
    with io.open(path, 'w', encoding='utf-8') as f:
        f.write(text)


def process_template(path, **options):
    return from_string(read_template(path), **options)


def process_directory(input, output, mode=MINIFIED, clean=False, **options):
    """
    Inlines every template in ``input`` and writes the results under the same
    names to ``output``, returning the paths written. Remaining ``options``
    are passed to :func:`tailinline.inline`.

    Templates are processed one at a time and the first error aborts the run.
    """
    names = list_templates(input)
    prepare_output(output, clean=clean)

    written = []
    for name in names:
        logger.debug('Processing %s', name)
        text = render(process_template(os.path.join(input, name), **options), mode)

        path = os.path.join(output, name)
        write_template(text, path)
        written.append(path)

    logger.info('Wrote %s template(s) to %s', len(written), output)
    return written
