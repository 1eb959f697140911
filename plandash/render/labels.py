# plandash/render/labels.py
from __future__ import annotations

from typing import Dict

LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "html_lang": "en",
        "default_title": "Project Dashboard",
        "page_suffix": "Dashboard",
        "meta_type": "Type",
        "meta_status": "Status",
        "meta_start": "Start",
        "meta_target": "Target",
        "meta_updated": "Updated",
        "stat_total": "Total tasks",
        "stat_done": "Done",
        "stat_in_progress": "In progress",
        "stat_blocked": "Blocked",
        "stat_overdue": "Overdue",
        "tab_kanban": "Kanban",
        "tab_timeline": "Timeline",
        "tab_gantt": "Gantt",
        "col_backlog": "📋 Backlog",
        "col_in-progress": "🔵 In progress",
        "col_blocked": "🔴 Blocked",
        "col_review": "🟡 In review",
        "col_done": "✅ Done",
        "untitled_task": "Untitled task",
        "no_tasks": "No tasks",
        "timeline_heading": "Milestone timeline",
        "no_milestones": "No milestones defined",
        "date_tbd": "Date TBD",
        "untitled_milestone": "Untitled milestone",
        "related_tasks": "Related tasks",
        "gantt_heading": "Gantt chart",
        "gantt_empty": "No tasks or milestones to display",
        "gantt_sequential_note": "(Tasks have no dates; shown in order)",
        "untitled": "Untitled",
        "legend_backlog": "Backlog",
        "legend_in-progress": "In progress",
        "legend_blocked": "Blocked",
        "legend_review": "In review",
        "legend_done": "Done",
        "legend_milestone": "Milestone",
    },
    "zh-TW": {
        "html_lang": "zh-TW",
        "default_title": "專案管理儀表板",
        "page_suffix": "儀表板",
        "meta_type": "類型",
        "meta_status": "狀態",
        "meta_start": "開始",
        "meta_target": "預計完成",
        "meta_updated": "更新時間",
        "stat_total": "總任務數",
        "stat_done": "已完成",
        "stat_in_progress": "進行中",
        "stat_blocked": "阻塞中",
        "stat_overdue": "已逾期",
        "tab_kanban": "看板",
        "tab_timeline": "時間軸",
        "tab_gantt": "甘特圖",
        "col_backlog": "📋 待辦",
        "col_in-progress": "🔵 進行中",
        "col_blocked": "🔴 阻塞",
        "col_review": "🟡 審核中",
        "col_done": "✅ 完成",
        "untitled_task": "未命名任務",
        "no_tasks": "尚無任務",
        "timeline_heading": "里程碑時間軸",
        "no_milestones": "尚未設定里程碑",
        "date_tbd": "日期未定",
        "untitled_milestone": "未命名里程碑",
        "related_tasks": "關聯任務",
        "gantt_heading": "甘特圖",
        "gantt_empty": "尚無任務或里程碑資料可顯示",
        "gantt_sequential_note": "（任務無日期資料，按順序顯示）",
        "untitled": "未命名",
        "legend_backlog": "待辦",
        "legend_in-progress": "進行中",
        "legend_blocked": "阻塞",
        "legend_review": "審核中",
        "legend_done": "完成",
        "legend_milestone": "里程碑",
    },
}

DEFAULT_LANG = "en"


def get_labels(lang: str | None = None) -> Dict[str, str]:
    key = lang or DEFAULT_LANG
    if key not in LABELS:
        raise ValueError(f"Unsupported language: {key!r} (known: {', '.join(sorted(LABELS))})")
    return LABELS[key]
