import pytest

from checkout_server.core.config import Settings
from checkout_server.services.payments import get_payments_provider
from checkout_server.services.payments.mock import MockPayments
from checkout_server.services.payments.razorpay_provider import RazorpayPayments


@pytest.fixture
def clean_env(monkeypatch):
    for key in (
        "PORT", "RAZORPAY_KEY_ID", "RAZORPAY_KEY_SECRET", "RAZORPAY_WEBHOOK_SECRET",
        "PAYMENTS_PROVIDER", "PAYMENT_CAPTURE", "ALLOWED_ORIGINS", "DEFAULT_ORDER_AMOUNT",
    ):
        monkeypatch.delenv(key, raising=False)


def test_defaults(clean_env):
    s = Settings()
    assert s.PORT == 3000
    assert s.ORDER_CURRENCY == "INR"
    assert s.PAYMENT_CAPTURE == 1
    assert s.DEFAULT_ORDER_AMOUNT == 500
    assert s.ALLOWED_ORIGINS == ["*"]
    assert s.razorpay_configured is False


def test_reads_environment(clean_env, monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("RAZORPAY_KEY_ID", "rzp_test_1")
    monkeypatch.setenv("RAZORPAY_KEY_SECRET", "secret")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test,")
    s = Settings()
    assert s.PORT == 8080
    assert s.razorpay_configured is True
    assert s.ALLOWED_ORIGINS == ["http://a.test", "http://b.test"]


def test_overrides_win(clean_env, monkeypatch):
    monkeypatch.setenv("RAZORPAY_KEY_SECRET", "from-env")
    assert Settings(RAZORPAY_KEY_SECRET="override").RAZORPAY_KEY_SECRET == "override"


def test_unknown_override_is_an_error(clean_env):
    with pytest.raises(TypeError):
        Settings(RAZORPAY_KEY="typo")


def test_capture_mode_must_be_binary(clean_env):
    with pytest.raises(ValueError):
        Settings(PAYMENT_CAPTURE=2)


@pytest.mark.parametrize("amount", [0, 0.001, -1, float("inf"), float("nan")])
def test_default_amount_must_be_at_least_one_paisa(clean_env, amount):
    with pytest.raises(ValueError):
        Settings(DEFAULT_ORDER_AMOUNT=amount)


def test_default_amount_from_environment_is_checked(clean_env, monkeypatch):
    monkeypatch.setenv("DEFAULT_ORDER_AMOUNT", "inf")
    with pytest.raises(ValueError):
        Settings()


def test_repr_hides_secrets(clean_env):
    s = Settings(RAZORPAY_KEY_ID="rzp_test_abcdefgh", RAZORPAY_KEY_SECRET="topsecret", RAZORPAY_WEBHOOK_SECRET="whsec")
    assert "topsecret" not in repr(s)
    assert "whsec" not in repr(s)


def test_provider_factory(clean_env):
    assert isinstance(get_payments_provider(Settings(PAYMENTS_PROVIDER="mock")), MockPayments)
    assert isinstance(get_payments_provider(Settings(PAYMENTS_PROVIDER="Razorpay")), RazorpayPayments)
    with pytest.raises(ValueError):
        get_payments_provider(Settings(PAYMENTS_PROVIDER="stripe"))


def test_health_reports_provider(client):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["env"] == "test"
    assert body["payments"]["provider"] == "recording"
    assert body["webhook_secret_configured"] is True
