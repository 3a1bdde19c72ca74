from repofetch.info.created import CreatedInfo


def test_display_created_info():
    info = CreatedInfo(creation_date="2 years ago")
    assert info.value() == "2 years ago"


def test_title():
    assert CreatedInfo("2 years ago").title() == "Created"