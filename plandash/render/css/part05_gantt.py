# plandash/render/css/part05_gantt.py
from __future__ import annotations

CSS_PART = r'''  .gantt-container {
    background: var(--bg-secondary);
    border-radius: 8px;
    padding: 24px;
    overflow-x: auto;
    margin-top: 24px;
  }
  .gantt-header {
    display: flex;
    align-items: center;
    justify-content: space-between;
    margin-bottom: 16px;
  }
  .gantt-header h3 {
    font-size: 16px;
    font-weight: 600;
  }
  .gantt-chart {
    position: relative;
    min-width: 800px;
  }
  .gantt-note {
    color: var(--text-secondary);
    font-size: 12px;
    margin-bottom: 12px;
  }
  .gantt-row {
    display: flex;
    align-items: center;
    margin-bottom: 8px;
    height: 36px;
  }
  .gantt-label {
    width: 200px;
    font-size: 13px;
    padding-right: 16px;
    white-space: nowrap;
    overflow: hidden;
    text-overflow: ellipsis;
  }
  .gantt-bars {
    flex: 1;
    height: 100%;
    background: var(--bg-tertiary);
    border-radius: 4px;
    position: relative;
  }
  .gantt-bar {
    position: absolute;
    height: 24px;
    top: 6px;
    border-radius: 4px;
    display: flex;
    align-items: center;
    padding: 0 8px;
    font-size: 11px;
    color: white;
    white-space: nowrap;
    overflow: hidden;
  }
  .gantt-bar.backlog { background: var(--text-secondary); }
  .gantt-bar.in-progress { background: var(--accent-blue); }
  .gantt-bar.blocked { background: var(--accent-red); }
  .gantt-bar.review { background: var(--accent-yellow); }
  .gantt-bar.done { background: var(--accent-green); }
  .gantt-bar.milestone { background: var(--accent-purple); }

  .gantt-scale {
    position: relative;
    height: 24px;
    margin-bottom: 8px;
    border-bottom: 1px solid var(--border-color);
  }
  .gantt-scale span {
    position: absolute;
    font-size: 11px;
    color: var(--text-secondary);
    transform: translateX(-50%);
  }
  .gantt-today {
    position: absolute;
    top: 24px;
    bottom: 0;
    width: 2px;
    background: var(--accent-red);
    z-index: 10;
  }
  .gantt-today::before {
    content: "";
    position: absolute;
    top: -8px;
    left: -4px;
    width: 0;
    height: 0;
    border-left: 5px solid transparent;
    border-right: 5px solid transparent;
    border-top: 8px solid var(--accent-red);
  }

  .legend {
    display: flex;
    gap: 16px;
    flex-wrap: wrap;
    margin-bottom: 16px;
    font-size: 12px;
  }
  .legend-item {
    display: flex;
    align-items: center;
    gap: 6px;
  }
  .legend-color {
    width: 12px;
    height: 12px;
    border-radius: 2px;
  }'''
