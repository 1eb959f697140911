# plandash/render/css/part03_kanban.py
from __future__ import annotations

CSS_PART = r'''  .kanban {
    display: grid;
    grid-template-columns: repeat(5, 1fr);
    gap: 16px;
    overflow-x: auto;
  }
  .kanban-column {
    background: var(--bg-secondary);
    border-radius: 8px;
    padding: 12px;
    min-width: 250px;
  }
  .column-header {
    display: flex;
    align-items: center;
    gap: 8px;
    margin-bottom: 12px;
    padding-bottom: 8px;
    border-bottom: 1px solid var(--border-color);
  }
  .column-header h3 {
    font-size: 14px;
    font-weight: 600;
  }
  .column-count {
    background: var(--bg-tertiary);
    color: var(--text-secondary);
    font-size: 12px;
    padding: 2px 8px;
    border-radius: 10px;
  }
  .task-card {
    background: var(--bg-tertiary);
    border: 1px solid var(--border-color);
    border-radius: 6px;
    padding: 12px;
    margin-bottom: 8px;
    transition: all 0.2s;
  }
  .task-card:hover {
    border-color: var(--accent-blue);
    transform: translateY(-1px);
  }
  .task-title {
    font-size: 14px;
    font-weight: 500;
    margin-bottom: 8px;
  }
  .task-meta {
    display: flex;
    flex-wrap: wrap;
    gap: 8px;
    font-size: 12px;
  }
  .priority {
    padding: 2px 6px;
    border-radius: 4px;
    font-weight: 500;
  }
  .priority-p0 { background: rgba(248, 81, 73, 0.2); color: var(--accent-red); }
  .priority-p1 { background: rgba(210, 153, 34, 0.2); color: var(--accent-yellow); }
  .priority-p2 { background: rgba(63, 185, 80, 0.2); color: var(--accent-green); }
  .due-date { color: var(--text-secondary); }
  .due-date.overdue { color: var(--accent-red); }
  .assignee { color: var(--accent-blue); }

  @media (max-width: 1024px) {
    .kanban { grid-template-columns: repeat(3, 1fr); }
  }
  @media (max-width: 768px) {
    .kanban { grid-template-columns: 1fr; }
    .stats { grid-template-columns: repeat(2, 1fr); }
  }'''
