from catalog.models import db

class Director(db.Model):
    __tablename__ = "director"

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(45), nullable=False)
    last_name = db.Column(db.String(45), nullable=False, index=True)

    def __repr__(self):
        return f"<Director id={self.id} {self.first_name} {self.last_name}>"
