from types import SimpleNamespace

from wpdock.core.random import RANDOM


def test_password_from_openssl(app, runner):
    runner.on('openssl', 'rand', stdout='q1w2e3r4t5y6u7i8\n')
    assert RANDOM.password(SimpleNamespace(app=app)) == 'q1w2e3r4t5y6u7i8'
    assert runner.find('openssl') == ['openssl', 'rand', '-base64', '12']


def test_password_falls_back_when_openssl_is_silent(app, runner):
    runner.on('openssl', returncode=1, stdout='')
    generated = RANDOM.password(SimpleNamespace(app=app))
    assert len(generated) >= 12
