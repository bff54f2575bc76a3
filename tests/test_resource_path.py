from __future__ import annotations

import pytest

from maiden.services.resource_path import ResourcePath, decode, encode, split_name

PREFIX = '/api/v1/dust'


def test_encode_empty_segment_is_prefix():
    assert encode(PREFIX, '') == PREFIX
    assert encode(PREFIX + '/', '') == PREFIX
    assert encode(PREFIX) == PREFIX


def test_encode_escapes_each_segment_independently():
    assert encode(PREFIX, 'a/b') == PREFIX + '/a%2Fb'
    assert encode(PREFIX, 'a', 'b c') == PREFIX + '/a/b%20c'
    assert encode(PREFIX, '', 'x', '') == PREFIX + '/x'


def test_encode_keeps_path_segment_safe_characters():
    assert encode(PREFIX, 'a+b=c@d:e$f&g') == PREFIX + '/a+b=c@d:e$f&g'
    assert encode(PREFIX, 'semi;colon,comma?') == PREFIX + '/semi%3Bcolon%2Ccomma%3F'


@pytest.mark.parametrize(
    'name',
    [
        'hello world.txt',
        '100%.lua',
        '%2F already escaped',
        'naïve',
        '日本語のファイル',
        'emoji 🎛.wav',
        "it's (1)!",
        'a+b=c@d',
        'dir/with/slashes',
    ],
)
def test_decode_reverses_encode(name):
    url = encode(PREFIX, name)
    assert ' ' not in url
    assert decode(PREFIX, url) == name


def test_decode_multi_segment_url():
    assert decode(PREFIX, PREFIX + '/my%20dir/caf%C3%A9.lua') == 'my dir/café.lua'
    assert decode(PREFIX, PREFIX) == ''


def test_decode_rejects_foreign_prefix():
    with pytest.raises(ValueError):
        decode(PREFIX, '/api/v1/other/file')
    with pytest.raises(ValueError):
        decode(PREFIX, PREFIX + 'suffix')


def test_resource_path_child_escapes_parent_segments():
    resources = ResourcePath(PREFIX)

    sub = resources.child('my dir', '', 'sub')

    assert sub('') == PREFIX + '/my%20dir/sub'
    assert sub('x.lua') == PREFIX + '/my%20dir/sub/x.lua'
    assert resources('') == PREFIX


def test_resource_path_for_name_splits_on_separators():
    resources = ResourcePath(PREFIX)

    assert resources.for_name('foo//bar baz/') == PREFIX + '/foo/bar%20baz'
    assert resources.for_name('') == PREFIX
    assert split_name('/a//b/') == ['a', 'b']
