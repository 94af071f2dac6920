import pytest

from patternbook.chain_of_responsibility import (
    Cashier,
    Doctor,
    Medical,
    Patient,
    Reception,
    main,
)


def _chain():
    return Reception(Doctor(Medical(Cashier())))


def test_new_patient_goes_through_every_department(capsys):
    patient = Patient(name="abc")
    _chain().execute(patient)
    assert patient.registration_done
    assert patient.doctor_check_up_done
    assert patient.medicine_done
    assert not patient.payment_done
    assert capsys.readouterr().out.splitlines() == [
        "Reception registering patient",
        "Doctor checking patient",
        "Medical giving medicine to patient",
        "Cashier getting money from patient patient",
    ]


def test_completed_steps_are_skipped(capsys):
    patient = Patient(
        name="abc",
        registration_done=True,
        doctor_check_up_done=True,
        medicine_done=True,
        payment_done=True,
    )
    _chain().execute(patient)
    assert capsys.readouterr().out.splitlines() == [
        "Patient registration already done",
        "Doctor checkup already done",
        "Medicine already given to patient",
        "Payment Done",
        "Cashier getting money from patient patient",
    ]


def test_second_visit_reports_done(capsys):
    chain = _chain()
    patient = Patient(name="abc")
    chain.execute(patient)
    capsys.readouterr()
    chain.execute(patient)
    assert capsys.readouterr().out.splitlines()[0] == "Patient registration already done"


def test_missing_next_department_raises():
    patient = Patient(name="abc")
    with pytest.raises(RuntimeError):
        Doctor().execute(patient)
    assert patient.doctor_check_up_done


def test_main_output(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Reception registering patient"
    assert lines[-1] == "Cashier getting money from patient patient"