"""Chain of responsibility: a patient passes through hospital departments."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Patient:
    """A patient and the steps already completed for them."""

    name: str
    registration_done: bool = False
    doctor_check_up_done: bool = False
    medicine_done: bool = False
    payment_done: bool = False


class Department(ABC):
    """One link of the chain, optionally followed by another department."""

    def __init__(self, next_department: Department | None = None) -> None:
        self.next_department = next_department

    @abstractmethod
    def execute(self, patient: Patient) -> None:
        """Handle the patient and pass them on."""

    def _forward(self, patient: Patient) -> None:
        if self.next_department is None:
            raise RuntimeError(f"{type(self).__name__} has no next department")
        self.next_department.execute(patient)


class Reception(Department):
    def execute(self, patient: Patient) -> None:
        if patient.registration_done:
            print("Patient registration already done")
        else:
            print("Reception registering patient")
            patient.registration_done = True
        self._forward(patient)


class Doctor(Department):
    def execute(self, patient: Patient) -> None:
        if patient.doctor_check_up_done:
            print("Doctor checkup already done")
        else:
            print("Doctor checking patient")
            patient.doctor_check_up_done = True
        self._forward(patient)


class Medical(Department):
    def execute(self, patient: Patient) -> None:
        if patient.medicine_done:
            print("Medicine already given to patient")
        else:
            print("Medical giving medicine to patient")
            patient.medicine_done = True
        self._forward(patient)


class Cashier(Department):
    """The last department; it does not pass the patient on."""

    def execute(self, patient: Patient) -> None:
        if patient.payment_done:
            print("Payment Done")
        print("Cashier getting money from patient patient")


def main(argv: list[str] | None = None) -> None:
    cashier = Cashier()
    medical = Medical(cashier)
    doctor = Doctor(medical)
    reception = Reception(doctor)

    reception.execute(Patient(name="abc"))


if __name__ == "__main__":
    main()