import pytest

from patternbook.template import Email, Otp, Sms, main


class _RecordingOtp(Otp):
    def __init__(self):
        self.calls = []

    def gen_random_otp(self, length):
        self.calls.append(("gen", length))
        return "x" * length

    def save_otp_cache(self, otp):
        self.calls.append(("save", otp))

    def get_message(self, otp):
        self.calls.append(("message", otp))
        return "msg:" + otp

    def send_notification(self, message):
        self.calls.append(("send", message))


class _FailingOtp(_RecordingOtp):
    def send_notification(self, message):
        raise RuntimeError("delivery failed")


def test_workflow_runs_steps_in_order():
    recorder = _RecordingOtp()
    result = Otp.gen_and_send_otp(recorder, 3)
    assert [name for name, _ in recorder.calls] == ["gen", "save", "message", "send"]
    assert recorder.calls[0] == ("gen", 3)
    assert recorder.calls[-1] == ("send", "msg:xxx")
    assert result == "msg:xxx"


def test_send_failure_propagates():
    failing = _FailingOtp()
    with pytest.raises(RuntimeError, match="delivery failed"):
        Otp.gen_and_send_otp(failing, 4)
    assert failing.calls == [("gen", 4), ("save", "xxxx"), ("message", "xxxx")]


def test_otp_is_abstract():
    with pytest.raises(TypeError):
        Otp()


def test_sms_message():
    assert Sms().get_message("1234") == "SMS OTP for login is 1234"


def test_email_message():
    assert Email().get_message("1234") == "EMAIL OTP for login is 1234"


def test_sms_workflow_output(capsys):
    message = Sms().gen_and_send_otp(4)
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "SMS: generating random otp 1234"
    assert out[1] == "SMS: saving otp: 1234 to cache"
    assert out[2] == f"SMS: sending sms: {message}"
    assert message == Sms().get_message("1234")


def test_email_workflow_output(capsys):
    message = Email().gen_and_send_otp(4)
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "EMAIL: generating random otp 1234"
    assert out[1] == "EMAIL: saving otp: 1234 to cache"
    assert out[2] == f"EMAIL: sending email: {message}"


def test_main_runs_both_channels(capsys):
    main()
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 7
    assert out[3] == ""
    assert out[2].startswith("SMS: sending sms")
    assert out[6].startswith("EMAIL: sending email")