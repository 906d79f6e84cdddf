import os

from registrar.cli import CANCELLED, InteractiveShell, read_choice, read_non_empty, read_student_id


def scripted(*answers):
    remaining = list(answers)

    def input_func(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)
    return input_func


def test_prompt_cancel_is_a_sentinel(capsys):
    assert read_non_empty(scripted("", "  EsC "), "Name: ") is CANCELLED
    assert "Input cannot be empty" in capsys.readouterr().out
    assert read_student_id(scripted("S1", "X001", "S001")) == "S001"


def test_full_session_adds_enrolls_reports_and_exports(app, capsys):
    shell = InteractiveShell(app, input_func=scripted(
        "1", "Alice Johnson", "S1", "S001", "Grad", "Undergraduate",
        "5", "Data Structures", "CSE102",
        "8", "S001", "CSE102",
        "8", "S001", "CSE102",
        "10", "CSE102",
        "0",
    ))

    shell.run()

    out = capsys.readouterr().out
    assert "Invalid student ID format" in out
    assert "Invalid type" in out
    assert "Student added: Alice Johnson (Undergraduate)" in out
    assert "Student S001 is already enrolled in course CSE102." in out
    assert "Course report saved to:" in out
    assert "Exiting the system. Goodbye!" in out
    assert os.path.exists(app.config.students_path)
    assert os.path.exists(app.config.courses_path)
    assert app.registry.find_course("CSE102").enrolled_student_ids == ["S001"]


def test_cancel_returns_to_menu_without_changes(app, capsys):
    InteractiveShell(app, input_func=scripted("1", "Alice Johnson", "esc", "0")).run()

    assert "Operation cancelled by user." in capsys.readouterr().out
    assert app.registry.find_student("S001") is None


def test_invalid_choices_are_reported(app, capsys):
    InteractiveShell(app, input_func=scripted("abc", "99", "0")).run()

    assert "Invalid choice. Please try again." in capsys.readouterr().out


def test_read_choice_reprompts_on_non_numbers():
    prompts = []
    answers = ["abc", "", "7"]

    def input_func(prompt):
        prompts.append(prompt)
        return answers.pop(0)

    assert read_choice(input_func) == 7
    assert prompts == [
        "Enter your choice: ",
        "Invalid input. Please enter a valid number: ",
        "Invalid input. Please enter a valid number: ",
    ]


def test_list_and_search_after_sample_data(app, capsys):
    InteractiveShell(app, input_func=scripted("13", "3", "7", "4", "CSE104", "4", "zzz", "0")).run()

    out = capsys.readouterr().out
    assert "Sample data populated successfully." in out
    assert "Name: Alice Johnson, ID: S001, Type: Undergraduate" in out
    assert "Course Name: Operating Systems, Course Code: CSE104" in out
    assert "Name: David Williams, ID: S004, Type: Undergraduate" in out
    assert "No matching student found." in out


def test_end_of_input_exits_and_exports(app, capsys):
    InteractiveShell(app, input_func=scripted("13")).run()

    assert "Exiting the system. Goodbye!" in capsys.readouterr().out
    with open(app.config.students_path, encoding="utf-8") as f:
        assert f.read().count("\n") == 6


def test_course_code_prompt_rejects_unstorable_codes(app, capsys):
    InteractiveShell(app, input_func=scripted(
        "5", "Broken", "A;B", "../x", "CSE102",
        "0",
    )).run()

    out = capsys.readouterr().out
    assert out.count("Invalid course code.") == 2
    assert "Course added: Broken (CSE102)" in out
    assert [course.course_code for course in app.registry.list_courses()] == ["CSE102"]
