from flask_sqlalchemy import SQLAlchemy
import sqlalchemy as sa

db = SQLAlchemy()

class Task(db.Model):
    __tablename__ = 'tasks'
    # ids are never handed out twice, sqlite needs AUTOINCREMENT for that
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    description = db.Column('task', db.Text, nullable=False)
    # left to the store on insert
    done = db.Column(db.Boolean, nullable=False, server_default=sa.false())

    def __repr__(self):
        return f'<Task {self.id} {self.description!r} done={self.done}>'
