from scorbot_kinematics.cli import main


def test_fk_prints_pose(capsys):
    assert main(["fk", "0", "0", "0", "0", "0"]) == 0
    out = capsys.readouterr().out
    assert "x=603.0000" in out
    assert "z=349.0000" in out


def test_fk_in_degrees(capsys):
    assert main(["--degrees", "fk", "90", "0", "0", "0", "0"]) == 0
    assert "y=603.0000" in capsys.readouterr().out


def test_ik_reachable(capsys):
    assert main(["--robot", "reference", "ik", "200", "0", "100", "0", "0"]) == 0
    out = capsys.readouterr().out
    assert "elbow-up" in out
    assert "unreachable" not in out


def test_ik_unreachable_all_branches(capsys):
    code = main(["--robot", "reference", "ik", "1000", "0", "0", "0", "0", "--policy", "all"])
    assert code == 1
    out = capsys.readouterr().out
    assert out.count("unreachable") == 2
    assert out.index("elbow-up") < out.index("elbow-down")


def test_ik_negative_coordinates(capsys):
    assert main(["ik", "300", "-100", "400", "-0.5", "0", "--policy", "down"]) == 0
    assert "elbow-down" in capsys.readouterr().out


def test_invalid_values_report_error(capsys):
    assert main(["ik", "nan", "0", "0", "0", "0"]) == 2
    assert "error:" in capsys.readouterr().out
