"""
Baseline (preflight) stylesheets, keyed by framework version.

Each rule is tagged with the release range it belongs to so that older
baselines can be reproduced.
"""


VERSIONS = ('3.0', '3.1', '3.2', '3.3', '3.4')

SANS = (
    "ui-sans-serif, system-ui, sans-serif, 'Apple Color Emoji', "
    "'Segoe UI Emoji', 'Segoe UI Symbol', 'Noto Color Emoji'"
)

MONO = (
    "ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, "
    "'Liberation Mono', 'Courier New', monospace"
)

# (first version, last version or None, rule text)
RULES = (
    ('3.0', None, """
*, ::before, ::after {
  box-sizing: border-box;
  border-width: 0;
  border-style: solid;
  border-color: #e5e7eb;
}"""),
    ('3.0', '3.2', """
html {
  line-height: 1.5;
  -webkit-text-size-adjust: 100%;
  -moz-tab-size: 4;
  tab-size: 4;
  font-family: """ + SANS + """;
  font-feature-settings: normal;
}"""),
    ('3.3', '3.3', """
html {
  line-height: 1.5;
  -webkit-text-size-adjust: 100%;
  -moz-tab-size: 4;
  tab-size: 4;
  font-family: """ + SANS + """;
  font-feature-settings: normal;
  font-variation-settings: normal;
}"""),
    ('3.4', None, """
html, :host {
  line-height: 1.5;
  -webkit-text-size-adjust: 100%;
  -moz-tab-size: 4;
  tab-size: 4;
  font-family: """ + SANS + """;
  font-feature-settings: normal;
  font-variation-settings: normal;
  -webkit-tap-highlight-color: transparent;
}"""),
    ('3.0', None, """
body {
  margin: 0;
  line-height: inherit;
}
hr {
  height: 0;
  color: inherit;
  border-top-width: 1px;
}
h1, h2, h3, h4, h5, h6 {
  font-size: inherit;
  font-weight: inherit;
}
a {
  color: inherit;
  text-decoration: inherit;
}
b, strong {
  font-weight: bolder;
}"""),
    ('3.0', None, """
code, kbd, samp, pre {
  font-family: """ + MONO + """;
  font-size: 1em;
}"""),
    ('3.0', None, """
small {
  font-size: 80%;
}
sub, sup {
  font-size: 75%;
  line-height: 0;
  position: relative;
  vertical-align: baseline;
}
sub {
  bottom: -0.25em;
}
sup {
  top: -0.5em;
}
table {
  text-indent: 0;
  border-color: inherit;
  border-collapse: collapse;
}"""),
    ('3.0', '3.3', """
button, input, optgroup, select, textarea {
  font-family: inherit;
  font-size: 100%;
  font-weight: inherit;
  line-height: inherit;
  color: inherit;
  margin: 0;
  padding: 0;
}"""),
    ('3.4', None, """
button, input, optgroup, select, textarea {
  font-family: inherit;
  font-feature-settings: inherit;
  font-variation-settings: inherit;
  font-size: 100%;
  font-weight: inherit;
  line-height: inherit;
  letter-spacing: inherit;
  color: inherit;
  margin: 0;
  padding: 0;
}"""),
    ('3.0', None, """
button, select {
  text-transform: none;
}
button, [type='button'], [type='reset'], [type='submit'] {
  -webkit-appearance: button;
  background-color: transparent;
  background-image: none;
}
:-moz-focusring {
  outline: auto;
}
:-moz-ui-invalid {
  box-shadow: none;
}
progress {
  vertical-align: baseline;
}
::-webkit-inner-spin-button, ::-webkit-outer-spin-button {
  height: auto;
}
[type='search'] {
  -webkit-appearance: textfield;
  outline-offset: -2px;
}
summary {
  display: list-item;
}
blockquote, dl, dd, h1, h2, h3, h4, h5, h6, hr, figure, p, pre {
  margin: 0;
}
fieldset {
  margin: 0;
  padding: 0;
}
legend {
  padding: 0;
}
ol, ul, menu {
  list-style-type: none;
  margin: 0;
  padding: 0;
}"""),
    ('3.3', None, """
dialog {
  padding: 0;
}"""),
    ('3.0', None, """
textarea {
  resize: vertical;
}
input::placeholder, textarea::placeholder {
  opacity: 1;
  color: #9ca3af;
}
button, [role='button'] {
  cursor: pointer;
}
:disabled {
  cursor: default;
}
img, svg, video, canvas, audio, iframe, embed, object {
  display: block;
  vertical-align: middle;
}
img, video {
  max-width: 100%;
  height: auto;
}
[hidden] {
  display: none;
}"""),
)


def version_key(version):
    return tuple(int(bit) for bit in version.split('.'))


def get_latest_version():
    return VERSIONS[-1]


def get_base_css(version=None):
    """
    Returns the baseline stylesheet text for ``version`` (the latest release
    when omitted.)
    """
    if version is None:
        version = get_latest_version()

    if version not in VERSIONS:
        raise ValueError('unknown baseline version: %s (expected one of %s)' % (
            version, ', '.join(VERSIONS)))

    key = version_key(version)
    return '\n'.join(
        text.strip() for first, last, text in RULES
        if version_key(first) <= key and (last is None or key <= version_key(last))
    )
