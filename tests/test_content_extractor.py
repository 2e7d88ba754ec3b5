"""Tests for message content extraction and tool formatting."""

import json

import pytest

from claude_code_history import Role, decode_message, extract_message_content, message_role
from claude_code_history.render import join_parts, truncate

TS = "2025-01-15T10:00:00Z"


@pytest.fixture
def assistant_msg(make_entry):
    """Build an assistant Message from a list of raw content blocks."""

    def build(*blocks):
        return decode_message(make_entry("assistant", list(blocks), TS))

    return build


def tool_use(name, **tool_input):
    return {"type": "tool_use", "id": "toolu_1", "name": name, "input": tool_input}


def tool_result(content=None, **extra):
    block = {"type": "tool_result", "tool_use_id": "toolu_1"}
    if content is not None:
        block["content"] = content
    block.update(extra)
    return block


class TestBasics:
    def test_no_content(self, make_entry):
        msg = decode_message(make_entry("user", None, TS))
        assert extract_message_content(msg) == ""
        assert extract_message_content(msg, verbose=True) == ""

    def test_empty_string_content(self, make_entry):
        msg = decode_message(make_entry("user", "", TS))
        assert extract_message_content(msg) == ""

    def test_plain_string_unchanged_in_both_modes(self, make_entry):
        text = "Line one\n  [bracketed] line two\n"
        msg = decode_message(make_entry("user", text, TS))
        assert extract_message_content(msg) == text
        assert extract_message_content(msg, verbose=True) == text

    def test_text_blocks_joined_with_newline(self, assistant_msg):
        msg = assistant_msg(
            {"type": "text", "text": "First"}, {"type": "text", "text": "Second"}
        )
        assert extract_message_content(msg) == "First\nSecond"

    def test_empty_and_unknown_blocks_omitted(self, assistant_msg):
        msg = assistant_msg(
            {"type": "text", "text": ""},
            {"type": "thinking", "thinking": "secret"},
            {"type": "image", "source": {}},
            {"type": "text", "text": "Visible"},
        )
        assert extract_message_content(msg) == "Visible"

    def test_only_unknown_blocks(self, assistant_msg):
        msg = assistant_msg({"type": "mystery"})
        assert extract_message_content(msg) == ""

    def test_text_and_tool_use_mixed(self, assistant_msg):
        msg = assistant_msg(
            {"type": "text", "text": "Running tests"},
            tool_use("Bash", command="pytest", description="Run tests"),
        )
        assert extract_message_content(msg) == "Running tests\n🔧 Run tests"


class TestJoinParts:
    def test_same_category_single_newline(self):
        assert join_parts(["a", "b", "c"]) == "a\nb\nc"
        assert join_parts(["[a]", "[b]"]) == "[a]\n[b]"

    def test_category_change_blank_line(self):
        assert join_parts(["text", "[tool]"]) == "text\n\n[tool]"
        assert join_parts(["[tool]", "text"]) == "[tool]\n\ntext"
        assert join_parts(["a", "[b]", "[c]", "d"]) == "a\n\n[b]\n[c]\n\nd"

    def test_empty(self):
        assert join_parts([]) == ""


class TestTruncate:
    def test_boundary(self):
        assert truncate("x" * 40, 40) == "x" * 40
        assert truncate("x" * 41, 40) == "x" * 40 + "..."


class TestBashTool:
    def test_compact_prefers_description(self, assistant_msg):
        msg = assistant_msg(tool_use("Bash", command="ls -la /tmp", description="List files"))
        assert extract_message_content(msg) == "🔧 List files"

    def test_compact_command_at_40_chars_not_truncated(self, assistant_msg):
        command = "c" * 40
        msg = assistant_msg(tool_use("Bash", command=command))
        assert extract_message_content(msg) == f"🔧 {command}"

    def test_compact_command_at_41_chars_truncated(self, assistant_msg):
        command = "c" * 41
        msg = assistant_msg(tool_use("Bash", command=command))
        out = extract_message_content(msg)
        assert out == "🔧 " + "c" * 40 + "..."
        assert len(out[len("🔧 ") :]) == 43

    def test_compact_fallback_label(self, assistant_msg):
        assert extract_message_content(assistant_msg(tool_use("Bash"))) == "🔧 Bash command"

    def test_verbose(self, assistant_msg):
        long_command = "echo " + "x" * 100
        msg = assistant_msg(tool_use("Bash", command=long_command, description="Echo"))
        assert extract_message_content(msg, verbose=True) == (
            f"🔧 Running Bash command\n   Echo\n   $ {long_command}"
        )

    def test_verbose_without_fields(self, assistant_msg):
        msg = assistant_msg(tool_use("Bash"))
        assert extract_message_content(msg, verbose=True) == "🔧 Running Bash command"


class TestFileTools:
    def test_read_compact(self, assistant_msg):
        msg = assistant_msg(tool_use("Read", file_path="/home/u/project/src/app.py"))
        assert extract_message_content(msg) == "📖 app.py"

    def test_read_compact_without_path(self, assistant_msg):
        assert extract_message_content(assistant_msg(tool_use("Read"))) == "📖 Reading file"

    def test_read_verbose_with_range(self, assistant_msg):
        msg = assistant_msg(tool_use("Read", file_path="/a/b.py", limit=50, offset=100))
        assert extract_message_content(msg, verbose=True) == (
            "📖 Reading file\n   📄 b.py (50 lines, from line 100)"
        )

    def test_read_verbose_offset_only(self, assistant_msg):
        msg = assistant_msg(tool_use("Read", file_path="/a/b.py", offset=10))
        assert extract_message_content(msg, verbose=True).endswith("b.py (from line 10)")

    def test_read_verbose_no_range(self, assistant_msg):
        msg = assistant_msg(tool_use("Read", file_path="/a/b.py"))
        assert extract_message_content(msg, verbose=True) == "📖 Reading file\n   📄 b.py"

    def test_trailing_slash_keeps_full_path(self, assistant_msg):
        msg = assistant_msg(tool_use("Read", file_path="/a/dir/"))
        assert extract_message_content(msg) == "📖 /a/dir/"

    def test_edit_compact(self, assistant_msg):
        msg = assistant_msg(tool_use("Edit", file_path="/x/main.py", old_string="a", new_string="b"))
        assert extract_message_content(msg) == "✏️ main.py"

    def test_edit_compact_without_path(self, assistant_msg):
        assert extract_message_content(assistant_msg(tool_use("Edit"))) == "✏️ Editing file"

    def test_edit_verbose_previews_truncated(self, assistant_msg):
        old = "o" * 60
        new = "n" * 10
        msg = assistant_msg(tool_use("Edit", file_path="/x/main.py", old_string=old, new_string=new))
        out = extract_message_content(msg, verbose=True)
        assert out == (
            "✏️  Editing file\n"
            "   📄 main.py\n"
            f'   🔄 Replacing: "{"o" * 50}..."\n'
            f'   ➡️  With: "{new}"'
        )

    def test_edit_verbose_needs_both_strings(self, assistant_msg):
        msg = assistant_msg(tool_use("Edit", file_path="/x/main.py", old_string="a"))
        assert "Replacing" not in extract_message_content(msg, verbose=True)

    def test_multi_edit(self, assistant_msg):
        msg = assistant_msg(
            tool_use("MultiEdit", file_path="/x/util.py", edits=[{}, {}, {}])
        )
        assert extract_message_content(msg) == "📝 util.py"
        assert extract_message_content(msg, verbose=True) == (
            "📝 Multi-editing file\n   📄 util.py\n   🔄 3 changes"
        )

    def test_write(self, assistant_msg):
        msg = assistant_msg(tool_use("Write", file_path="/x/big.txt", content="y" * 12345))
        assert extract_message_content(msg) == "💾 big.txt"
        assert extract_message_content(msg, verbose=True) == (
            "💾 Creating file\n   📄 big.txt\n   📏 12,345 characters"
        )

    def test_write_without_path(self, assistant_msg):
        assert extract_message_content(assistant_msg(tool_use("Write"))) == "💾 Creating file"

    def test_ls_compact(self, assistant_msg):
        msg = assistant_msg(tool_use("LS", path="/home/u/project"))
        assert extract_message_content(msg) == "📁 project"
        assert extract_message_content(assistant_msg(tool_use("LS"))) == "📁 Listing directory"

    def test_ls_verbose_uses_generic_dump(self, assistant_msg):
        msg = assistant_msg(tool_use("LS", path="/home/u/project"))
        out = extract_message_content(msg, verbose=True)
        assert out.startswith("🔧 LS\n   ")
        assert '"path": "/home/u/project"' in out


class TestTodoTools:
    def test_todo_write_compact(self, assistant_msg):
        msg = assistant_msg(tool_use("TodoWrite", todos=[{}, {}]))
        assert extract_message_content(msg) == "📋 2 tasks"

    def test_todo_write_compact_no_todos(self, assistant_msg):
        assert extract_message_content(assistant_msg(tool_use("TodoWrite"))) == "📋 0 tasks"

    def test_todo_write_verbose(self, assistant_msg):
        todos = [
            {"content": "Write parser", "status": "completed"},
            {"content": "Write tests", "status": "in_progress"},
            {"content": "Ship it", "status": "pending"},
            {"content": "Celebrate", "status": "pending"},
            {"content": "Sleep", "status": "pending"},
        ]
        msg = assistant_msg(tool_use("TodoWrite", todos=todos))
        assert extract_message_content(msg, verbose=True) == (
            "📋 Managing tasks\n"
            "   📝 5 tasks updated\n"
            "   ✅ Write parser\n"
            "   🔄 Write tests\n"
            "   ⏳ Ship it\n"
            "   ... and 2 more tasks"
        )

    def test_todo_unknown_status_marker(self, assistant_msg):
        msg = assistant_msg(tool_use("TodoWrite", todos=[{"content": "Odd", "status": "blocked"}]))
        out = extract_message_content(msg, verbose=True)
        assert out.endswith("   📌 Odd")
        assert "more tasks" not in out

    def test_todo_non_string_status_marker(self, assistant_msg):
        todos = [{"content": "Listed", "status": ["done"]}, {"content": "Mapped", "status": {"a": 1}}]
        out = extract_message_content(assistant_msg(tool_use("TodoWrite", todos=todos)), verbose=True)
        assert out.endswith("   📌 Listed\n   📌 Mapped")

    def test_todo_read(self, assistant_msg):
        msg = assistant_msg(tool_use("TodoRead"))
        assert extract_message_content(msg) == "📋 Reading tasks"
        assert extract_message_content(msg, verbose=True) == "📋 Reading tasks"


class TestSearchTools:
    def test_glob(self, assistant_msg):
        msg = assistant_msg(tool_use("Glob", pattern="**/*.py", path="/src"))
        assert extract_message_content(msg) == "🔍 **/*.py"
        assert extract_message_content(msg, verbose=True) == (
            "🔍 Finding files\n   🎯 Pattern: **/*.py\n   📁 In: /src"
        )

    def test_glob_without_pattern(self, assistant_msg):
        assert extract_message_content(assistant_msg(tool_use("Glob"))) == "🔍 Finding files"

    def test_grep(self, assistant_msg):
        msg = assistant_msg(tool_use("Grep", pattern="def main", include="*.py"))
        assert extract_message_content(msg) == "🔎 def main"
        assert extract_message_content(msg, verbose=True) == (
            "🔎 Searching content\n   🎯 Pattern: def main\n   📋 Include: *.py"
        )

    def test_grep_without_pattern(self, assistant_msg):
        assert extract_message_content(assistant_msg(tool_use("Grep"))) == "🔎 Searching"


class TestUnknownTool:
    def test_compact_contains_name(self, assistant_msg):
        msg = assistant_msg(tool_use("CustomTool", x=1))
        out = extract_message_content(msg)
        assert "CustomTool" in out
        assert out == "🔧 CustomTool"

    def test_verbose_contains_parameter_dump(self, assistant_msg):
        msg = assistant_msg(tool_use("CustomTool", x=1))
        out = extract_message_content(msg, verbose=True)
        assert "CustomTool" in out
        assert json.dumps({"x": 1}, indent=2) in out

    def test_missing_name(self, assistant_msg):
        msg = assistant_msg({"type": "tool_use", "input": {}})
        assert extract_message_content(msg) == "🔧 Unknown tool"

    @pytest.mark.parametrize("name", [["Bash"], {"tool": "Read"}, 7])
    def test_non_string_name(self, assistant_msg, name):
        msg = assistant_msg({"type": "tool_use", "name": name, "input": {}})
        assert extract_message_content(msg) == "🔧 Unknown tool"
        assert extract_message_content(msg, verbose=True) == "🔧 Unknown tool\n   {}"


class TestToolResults:
    def test_compact_short_content(self, make_entry):
        msg = decode_message(make_entry("user", [tool_result("ok")], TS))
        assert extract_message_content(msg) == "📤 ok"

    def test_compact_truncated_at_80(self, make_entry):
        msg = decode_message(make_entry("user", [tool_result("r" * 81)], TS))
        assert extract_message_content(msg) == "📤 " + "r" * 80 + "..."
        msg = decode_message(make_entry("user", [tool_result("r" * 80)], TS))
        assert extract_message_content(msg) == "📤 " + "r" * 80

    def test_compact_without_content(self, make_entry):
        msg = decode_message(make_entry("user", [tool_result()], TS))
        assert extract_message_content(msg) == "📤 Tool completed"

    def test_structured_content_stringified(self, make_entry):
        content = [{"type": "text", "text": "hi"}]
        msg = decode_message(make_entry("user", [tool_result(content)], TS))
        assert extract_message_content(msg) == '📤 [{"type":"text","text":"hi"}]'

    def test_verbose_indents_every_line(self, make_entry):
        msg = decode_message(make_entry("user", [tool_result("one\ntwo")], TS))
        assert extract_message_content(msg, verbose=True) == "📤 Tool Result\n   one\n   two"

    def test_verbose_without_content(self, make_entry):
        msg = decode_message(make_entry("user", [tool_result()], TS))
        assert extract_message_content(msg, verbose=True) == "📤 Tool Result"

    def test_verbose_block_meta_sections(self, make_entry):
        block = tool_result(
            "done",
            toolUseResult={"stdout": "a\nb", "stderr": "warn", "interrupted": True},
        )
        msg = decode_message(make_entry("user", [block], TS))
        assert extract_message_content(msg, verbose=True) == (
            "📤 Tool Result\n"
            "   done\n"
            "   📤 Output:\n"
            "   a\n"
            "   b\n"
            "   ⚠️  Error:\n"
            "   warn\n"
            "   ⏹️  Interrupted: true"
        )

    def test_verbose_falls_back_to_message_meta(self, make_entry):
        msg = decode_message(
            make_entry(
                "user",
                [tool_result("done")],
                TS,
                tool_use_result={"stdout": "out", "stderr": "", "interrupted": False},
            )
        )
        out = extract_message_content(msg, verbose=True)
        assert out == "📤 Tool Result\n   done\n   📤 Output:\n   out"
        # Compact mode never shows metadata
        assert extract_message_content(msg) == "📤 done"


class TestMessageRole:
    def test_assistant(self, make_entry):
        msg = decode_message(make_entry("assistant", "x", TS))
        assert message_role(msg) is Role.ASSISTANT
        assert Role.ASSISTANT.label == "🤖 Claude"

    def test_system_when_tool_result_meta(self, make_entry):
        msg = decode_message(make_entry("user", "x", TS, tool_use_result={"stdout": "y"}))
        assert message_role(msg) is Role.SYSTEM
        assert Role.SYSTEM.icon == "📤"

    def test_system_with_string_meta(self, make_entry):
        msg = decode_message(make_entry("user", "x", TS, tool_use_result="Error: boom"))
        assert message_role(msg) is Role.SYSTEM

    @pytest.mark.parametrize("payload", [{}, []])
    def test_system_with_empty_meta(self, make_entry, payload):
        msg = decode_message(make_entry("user", "x", TS, tool_use_result=payload))
        assert message_role(msg) is Role.SYSTEM

    def test_user(self, make_entry):
        msg = decode_message(make_entry("user", "x", TS))
        assert message_role(msg) is Role.USER
        assert Role.USER.label == "👤 User"
