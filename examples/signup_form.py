"""
Signup form: collect every field error at once, then continue monadically.

Run: python examples/signup_form.py
"""
from failchain import (
    success,
    fail,
    curry,
    if_null_validation,
    flatten,
    ConsoleLogger,
)


def non_empty(field, value):
    return success(value) if value else fail(f"{field}: required")


def adult(age):
    return success(age) if age >= 18 else fail(f"age: {age} is under 18")


def email(value):
    return success(value) if "@" in value else fail(f"email: {value!r} has no @")


def make_user(name, age, mail):
    return {"name": name, "age": age, "email": mail}


def validate(form):
    name = non_empty("name", form.get("name"))
    age = if_null_validation(form.get("age"), lambda: "age: required").flat_map(adult)
    mail = non_empty("email", form.get("email")).flat_map(email)
    # applicative: every field is checked, failures are kept in field order
    return mail.ap(age.ap(name.map(curry(make_user))))


def main():
    log = ConsoleLogger(name="signup")

    ok = validate({"name": "ann", "age": 31, "email": "ann@example.com"})
    print("ok:", ok.get())

    bad = validate({"name": "", "age": 12, "email": "nope"})
    bad.log_failures(log, msg="rejected")
    print("errors:", bad.if_fail_with(lambda errs: errs))

    batch = flatten([validate({"name": "a", "age": 20, "email": "a@x"}), validate({"name": "b", "age": 2, "email": "b@x"})])
    print("batch:", batch.map(len).if_fail(0), batch.map_all_failures(" | ".join))


if __name__ == "__main__":
    main()
