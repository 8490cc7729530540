from contractdesk.entities import User, UserGroup
from contractdesk.mediator import UserMediator


def _wired(*components):
    mediator = UserMediator()
    for component in components:
        mediator.register_component(component)
        component.set_mediator(mediator)
    return mediator


def test_message_skips_sender():
    alice = User(1, "alice", "password")
    bob = User(2, "bob", "password")
    carol = User(3, "carol", "password")
    _wired(alice, bob, carol)
    alice.send("hello")
    assert alice.inbox == []
    assert bob.inbox == ["hello"]
    assert carol.inbox == ["hello"]


def test_equal_but_distinct_user_still_receives():
    alice = User(1, "alice", "password")
    twin = User(1, "alice", "password")
    _wired(alice, twin)
    alice.send("ping")
    assert twin.inbox == ["ping"]
    assert alice.inbox == []


def test_group_forwards_to_members():
    alice = User(1, "alice", "password")
    group = UserGroup("staff")
    bob = User(2, "bob", "password")
    group.add(bob)
    _wired(alice, group)
    alice.send("meeting")
    assert bob.inbox == ["meeting"]


def test_send_directly_through_mediator():
    alice = User(1, "alice", "password")
    bob = User(2, "bob", "password")
    mediator = _wired(alice, bob)
    mediator.send("direct", bob)
    assert alice.inbox == ["direct"]
    assert bob.inbox == []


def test_register_keeps_order():
    alice = User(1, "alice", "password")
    bob = User(2, "bob", "password")
    mediator = _wired(alice, bob)
    assert mediator.components == [alice, bob]


def test_change_permission_policy_prints(capsys):
    mediator = UserMediator()
    mediator.change_permission_policy(User(1, "alice", "password"), UserGroup("staff"))
    assert capsys.readouterr().out == "permissão para grupo de usuários ajustada\n"